"""Strict key and value checks for declarative config mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def validate_allowed_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed_keys: Iterable[str],
) -> None:
    """Reject keys that are not in ``allowed_keys``.

    Raises
    ------
    ValueError
        If unknown keys are present.
    """

    allowed = {str(key) for key in allowed_keys}
    unknown = sorted(str(key) for key in mapping if str(key) not in allowed)
    if unknown:
        raise ValueError(f"{field_name} has unknown keys: {unknown}")


def optional_int(
    mapping: Mapping[str, Any],
    key: str,
    *,
    field_name: str,
    default: int | None = None,
) -> int | None:
    """Read an optional integer entry from a config mapping.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping.
    key : str
        Entry to read.
    field_name : str
        Human-readable path used in error messages.
    default : int | None, optional
        Value returned when ``key`` is absent or ``None``.

    Returns
    -------
    int | None
        Parsed integer or ``default``.

    Raises
    ------
    ValueError
        If the entry is present but not an integer.
    """

    value = mapping.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name}.{key} must be an integer, got {value!r}")
    return value


__all__ = ["optional_int", "validate_allowed_keys"]
