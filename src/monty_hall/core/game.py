"""Domain types for one Monty Hall game.

Doors are identified by 1-based indices. An :class:`Arrangement` holds the
hidden content of every door for one round and is immutable once created.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from .errors import InvalidIndexError

DOORS: tuple[int, ...] = (1, 2, 3)


class DoorContent(str, Enum):
    """Hidden content behind one door.

    Attributes
    ----------
    PRIZE
        The single winning door.
    DECOY
        A losing door (a "goat" in the classic puzzle).
    """

    PRIZE = "prize"
    DECOY = "decoy"


class Strategy(str, Enum):
    """Player strategy after the host reveals a decoy."""

    STAY = "stay"
    SWITCH = "switch"

    @classmethod
    def from_stay(cls, stay: bool) -> Strategy:
        """Map a boolean ``stay`` flag onto the strategy enum."""

        return cls.STAY if stay else cls.SWITCH


class Outcome(str, Enum):
    """Round outcome for one strategy."""

    WIN = "WIN"
    LOSE = "LOSE"


def validate_door(door: Any, *, field_name: str = "door") -> int:
    """Validate one door index.

    Parameters
    ----------
    door : Any
        Candidate door index.
    field_name : str, optional
        Human-readable name used in error messages.

    Returns
    -------
    int
        The validated door index.

    Raises
    ------
    InvalidIndexError
        If ``door`` is not an integer in :data:`DOORS`.
    """

    # bool is an int subclass but never a meaningful door.
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)):
        raise InvalidIndexError(f"{field_name} must be an integer in {DOORS}, got {door!r}")
    value = int(door)
    if value not in DOORS:
        raise InvalidIndexError(f"{field_name} must be one of {DOORS}, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Arrangement:
    """Hidden door contents for one round.

    Parameters
    ----------
    contents : tuple[DoorContent, ...]
        Content per door, ordered by door index ``1..3``.

    Raises
    ------
    ValueError
        If ``contents`` does not hold exactly one prize and two decoys.
    """

    contents: tuple[DoorContent, ...]

    def __post_init__(self) -> None:
        contents = tuple(DoorContent(value) for value in self.contents)
        if len(contents) != len(DOORS):
            raise ValueError(f"arrangement must have {len(DOORS)} doors, got {len(contents)}")
        if contents.count(DoorContent.PRIZE) != 1:
            raise ValueError("arrangement must contain exactly one prize")
        object.__setattr__(self, "contents", contents)

    @classmethod
    def from_sequence(cls, contents: Sequence[DoorContent | str]) -> Arrangement:
        """Build an arrangement from enum members or their string values."""

        return cls(contents=tuple(DoorContent(value) for value in contents))

    @property
    def prize_door(self) -> int:
        """1-based index of the prize door."""

        return self.contents.index(DoorContent.PRIZE) + 1

    def content_at(self, door: int) -> DoorContent:
        """Return the content behind a 1-based door index."""

        return self.contents[validate_door(door) - 1]

    def is_prize(self, door: int) -> bool:
        return self.content_at(door) is DoorContent.PRIZE

    def __len__(self) -> int:
        return len(self.contents)


__all__ = [
    "DOORS",
    "Arrangement",
    "DoorContent",
    "Outcome",
    "Strategy",
    "validate_door",
]
