"""Random-generator helpers shared by every simulation step.

All randomness flows through an explicit :class:`numpy.random.Generator` so
runs can be reproduced from a seed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from monty_hall.core.errors import InvalidArgumentError


def validate_seed(seed: object, *, field_name: str = "seed") -> int | None:
    """Validate a generator seed.

    Returns
    -------
    int | None
        ``None`` or the seed as a plain ``int``.

    Raises
    ------
    InvalidArgumentError
        If ``seed`` is not ``None`` or an integer ``>= 0``.
    """

    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidArgumentError(f"{field_name} must be None or an integer >= 0, got {seed!r}")
    if int(seed) < 0:
        raise InvalidArgumentError(f"{field_name} must be >= 0, got {int(seed)}")
    return int(seed)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a generator from ``seed`` (``None`` uses NumPy's entropy source)."""

    return np.random.default_rng(validate_seed(seed))


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` or a fresh entropy-seeded generator when it is ``None``."""

    return rng if rng is not None else make_rng()


def spawn_rngs(seed: int | None, n_streams: int) -> tuple[np.random.Generator, ...]:
    """Derive independent generators from one seed.

    Parameters
    ----------
    seed : int | None
        Root seed. ``None`` draws root entropy from the OS.
    n_streams : int
        Number of child generators.

    Returns
    -------
    tuple[numpy.random.Generator, ...]
        Independent generators. The same ``seed`` always yields the same
        streams in the same order.

    Raises
    ------
    InvalidArgumentError
        If ``n_streams`` is smaller than one or ``seed`` is invalid.
    """

    if isinstance(n_streams, bool) or not isinstance(n_streams, (int, np.integer)) or n_streams < 1:
        raise InvalidArgumentError(f"n_streams must be an integer >= 1, got {n_streams!r}")
    children = np.random.SeedSequence(validate_seed(seed)).spawn(int(n_streams))
    return tuple(np.random.default_rng(child) for child in children)


def sample_door(candidates: Sequence[Any], rng: np.random.Generator) -> Any:
    """Sample one element uniformly from ``candidates``.

    Raises
    ------
    ValueError
        If ``candidates`` is empty.
    """

    if len(candidates) == 0:
        raise ValueError("candidates must not be empty")
    return candidates[int(rng.integers(len(candidates)))]


__all__ = ["make_rng", "resolve_rng", "sample_door", "spawn_rngs", "validate_seed"]
