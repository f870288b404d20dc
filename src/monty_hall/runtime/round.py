"""Single-round Monty Hall simulation.

One round runs in this order:

1. :func:`create_arrangement` hides one prize and two decoys,
2. :func:`select_initial_door` picks the player's first door,
3. :func:`reveal_goat_door` opens a decoy door the player did not pick,
4. :func:`decide_final_door` computes the final door per strategy,
5. :func:`resolve_outcome` scores each final door.

:func:`play_round` composes these steps and evaluates both strategies on the
same arrangement, pick, and reveal.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from monty_hall.core.game import (
    DOORS,
    Arrangement,
    DoorContent,
    Outcome,
    Strategy,
    validate_door,
)
from monty_hall.runtime.rng import resolve_rng, sample_door

_ARRANGEMENT_CONTENTS: tuple[DoorContent, ...] = (
    DoorContent.PRIZE,
    DoorContent.DECOY,
    DoorContent.DECOY,
)


@dataclass(frozen=True, slots=True)
class StrategyResult:
    """Result of one strategy within one round.

    Parameters
    ----------
    strategy : Strategy
        Strategy that produced ``final_door``.
    outcome : Outcome
        Whether ``final_door`` holds the prize.
    final_door : int
        Door the player ends on.
    """

    strategy: Strategy
    outcome: Outcome
    final_door: int


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Both strategy results for one shared round.

    Parameters
    ----------
    arrangement : Arrangement
        Hidden door contents.
    initial_pick : int
        Player's first door.
    revealed_door : int
        Decoy door opened by the host.
    stay : StrategyResult
        Result of keeping ``initial_pick``.
    switch : StrategyResult
        Result of moving to the remaining closed door.
    """

    arrangement: Arrangement
    initial_pick: int
    revealed_door: int
    stay: StrategyResult
    switch: StrategyResult

    def records(self) -> tuple[StrategyResult, StrategyResult]:
        """Return the STAY and SWITCH results, in that order."""

        return (self.stay, self.switch)

    def result_for(self, strategy: Strategy) -> StrategyResult:
        return self.stay if Strategy(strategy) is Strategy.STAY else self.switch


def create_arrangement(*, rng: np.random.Generator | None = None) -> Arrangement:
    """Return a uniformly random arrangement of one prize and two decoys."""

    generator = resolve_rng(rng)
    order = generator.permutation(len(_ARRANGEMENT_CONTENTS))
    return Arrangement(contents=tuple(_ARRANGEMENT_CONTENTS[int(i)] for i in order))


def select_initial_door(*, rng: np.random.Generator | None = None) -> int:
    """Return the player's first pick, uniform over :data:`DOORS`."""

    return int(sample_door(DOORS, resolve_rng(rng)))


def reveal_goat_door(
    arrangement: Arrangement,
    pick: int,
    *,
    rng: np.random.Generator | None = None,
) -> int:
    """Return the decoy door the host opens.

    Parameters
    ----------
    arrangement : Arrangement
        Hidden door contents.
    pick : int
        Player's initial door.
    rng : numpy.random.Generator | None, optional
        Generator used only when ``pick`` holds the prize.

    Returns
    -------
    int
        A door that is neither ``pick`` nor the prize door.

    Raises
    ------
    InvalidIndexError
        If ``pick`` is not a valid door index.

    Notes
    -----
    When ``pick`` is the prize door both other doors are decoys and one is
    chosen uniformly at random. Otherwise exactly one door is neither the pick
    nor the prize, and it is returned without consuming randomness.
    """

    pick = validate_door(pick, field_name="pick")
    candidates = tuple(
        door for door in DOORS if door != pick and not arrangement.is_prize(door)
    )
    if len(candidates) == 1:
        return candidates[0]
    return int(sample_door(candidates, resolve_rng(rng)))


def decide_final_door(stay: Strategy | bool, revealed: int, pick: int) -> int:
    """Return the final door for a strategy.

    Parameters
    ----------
    stay : Strategy | bool
        Strategy to apply. ``True`` means :attr:`Strategy.STAY` and ``False``
        means :attr:`Strategy.SWITCH`.
    revealed : int
        Door opened by the host.
    pick : int
        Player's initial door.

    Returns
    -------
    int
        ``pick`` for STAY, otherwise the only door that is neither ``pick``
        nor ``revealed``.

    Raises
    ------
    InvalidIndexError
        If either door index is invalid.
    ValueError
        If ``revealed`` equals ``pick``.
    """

    strategy = Strategy.from_stay(stay) if isinstance(stay, bool) else Strategy(stay)
    revealed = validate_door(revealed, field_name="revealed")
    pick = validate_door(pick, field_name="pick")
    if revealed == pick:
        raise ValueError(f"revealed door must differ from pick, both are {pick}")

    if strategy is Strategy.STAY:
        return pick
    (remaining,) = (door for door in DOORS if door not in (revealed, pick))
    return remaining


def resolve_outcome(final: int, arrangement: Arrangement) -> Outcome:
    """Return WIN when ``final`` holds the prize, LOSE otherwise.

    Raises
    ------
    InvalidIndexError
        If ``final`` is not a valid door index.
    """

    final = validate_door(final, field_name="final")
    return Outcome.WIN if arrangement.is_prize(final) else Outcome.LOSE


def play_round(*, rng: np.random.Generator | None = None) -> RoundResult:
    """Play one round and evaluate STAY and SWITCH on the same state.

    Parameters
    ----------
    rng : numpy.random.Generator | None, optional
        Generator for every random draw in the round.

    Returns
    -------
    RoundResult
        Shared round state plus one result per strategy. Exactly one of the
        two results is a WIN.
    """

    generator = resolve_rng(rng)
    arrangement = create_arrangement(rng=generator)
    pick = select_initial_door(rng=generator)
    revealed = reveal_goat_door(arrangement, pick, rng=generator)

    results: dict[Strategy, StrategyResult] = {}
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        final = decide_final_door(strategy, revealed, pick)
        results[strategy] = StrategyResult(
            strategy=strategy,
            outcome=resolve_outcome(final, arrangement),
            final_door=final,
        )

    return RoundResult(
        arrangement=arrangement,
        initial_pick=pick,
        revealed_door=revealed,
        stay=results[Strategy.STAY],
        switch=results[Strategy.SWITCH],
    )


__all__ = [
    "RoundResult",
    "StrategyResult",
    "create_arrangement",
    "decide_final_door",
    "play_round",
    "resolve_outcome",
    "reveal_goat_door",
    "select_initial_door",
]
