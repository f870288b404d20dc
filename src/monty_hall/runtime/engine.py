"""Batch runner that estimates STAY and SWITCH win probabilities.

:func:`play_batch` repeats :func:`~monty_hall.runtime.round.play_round` and
aggregates results into a strategy × outcome contingency table plus
row-normalized proportions.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from monty_hall.core.errors import InvalidArgumentError
from monty_hall.core.game import Outcome, Strategy
from monty_hall.runtime.rng import make_rng, validate_seed
from monty_hall.runtime.round import RoundResult, play_round

DEFAULT_N_ROUNDS = 100
SUMMARY_DECIMALS = 2

STRATEGIES: tuple[Strategy, ...] = (Strategy.STAY, Strategy.SWITCH)
OUTCOMES: tuple[Outcome, ...] = (Outcome.LOSE, Outcome.WIN)


def validate_n_rounds(n: object, *, field_name: str = "n") -> int:
    """Validate a batch size.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is not an integer ``>= 1``.
    """

    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgumentError(f"{field_name} must be an integer >= 1, got {n!r}")
    if int(n) < 1:
        raise InvalidArgumentError(f"{field_name} must be >= 1, got {int(n)}")
    return int(n)


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Runtime configuration for one batch.

    Parameters
    ----------
    n_rounds : int, optional
        Number of rounds to simulate.
    seed : int | None, optional
        Seed used to initialize the random generator. ``None`` uses
        NumPy's entropy source.

    Raises
    ------
    InvalidArgumentError
        If ``n_rounds`` is not an integer ``>= 1`` or ``seed`` is negative.
    """

    n_rounds: int = DEFAULT_N_ROUNDS
    seed: int | None = None

    def __post_init__(self) -> None:
        validate_n_rounds(self.n_rounds, field_name="n_rounds")
        validate_seed(self.seed, field_name="seed")


@dataclass(frozen=True, slots=True)
class StrategyRecord:
    """One flat ``(strategy, outcome)`` record.

    Parameters
    ----------
    round_index : int
        Zero-based round index within the batch.
    strategy : Strategy
        Evaluated strategy.
    outcome : Outcome
        Strategy outcome in that round.
    """

    round_index: int
    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Aggregated output of one batch.

    Parameters
    ----------
    rounds : tuple[RoundResult, ...]
        Per-round results in simulation order.
    records : tuple[StrategyRecord, ...]
        Two records per round, STAY before SWITCH.
    counts : dict[Strategy, dict[Outcome, int]]
        Contingency counts per strategy and outcome.
    proportions : dict[Strategy, dict[Outcome, float]]
        Row-normalized ``counts`` rounded to ``SUMMARY_DECIMALS``.
    """

    rounds: tuple[RoundResult, ...]
    records: tuple[StrategyRecord, ...]
    counts: dict[Strategy, dict[Outcome, int]]
    proportions: dict[Strategy, dict[Outcome, float]]

    @classmethod
    def from_rounds(cls, rounds: Sequence[RoundResult]) -> BatchResult:
        """Build records and summary tables from round results.

        Raises
        ------
        InvalidArgumentError
            If ``rounds`` is empty.
        """

        rounds = tuple(rounds)
        if not rounds:
            raise InvalidArgumentError("a batch must contain at least one round")

        records = tuple(
            StrategyRecord(round_index=index, strategy=result.strategy, outcome=result.outcome)
            for index, round_result in enumerate(rounds)
            for result in round_result.records()
        )
        counts = contingency_counts(records)
        return cls(
            rounds=rounds,
            records=records,
            counts=counts,
            proportions=row_proportions(counts),
        )

    @property
    def n_rounds(self) -> int:
        return len(self.rounds)

    def win_rate(self, strategy: Strategy | str) -> float:
        """Return the unrounded win proportion for one strategy."""

        row = self.counts[Strategy(strategy)]
        return row[Outcome.WIN] / float(sum(row.values()))

    def format_summary(self) -> str:
        """Render ``proportions`` as a strategy × outcome text table."""

        width = max(len("strategy"), *(len(strategy.value) for strategy in STRATEGIES))
        header = f"{'strategy':<{width}}  " + "  ".join(f"{outcome.value:>5}" for outcome in OUTCOMES)
        lines = [header]
        for strategy in STRATEGIES:
            cells = "  ".join(
                f"{self.proportions[strategy][outcome]:>5.{SUMMARY_DECIMALS}f}"
                for outcome in OUTCOMES
            )
            lines.append(f"{strategy.value:<{width}}  {cells}")
        return "\n".join(lines)


def contingency_counts(records: Sequence[StrategyRecord]) -> dict[Strategy, dict[Outcome, int]]:
    """Count records per strategy and outcome."""

    counts = {strategy: {outcome: 0 for outcome in OUTCOMES} for strategy in STRATEGIES}
    for record in records:
        counts[record.strategy][record.outcome] += 1
    return counts


def row_proportions(
    counts: Mapping[Strategy, Mapping[Outcome, int]],
    *,
    decimals: int = SUMMARY_DECIMALS,
) -> dict[Strategy, dict[Outcome, float]]:
    """Normalize each strategy row of ``counts`` to sum to one.

    Rows with no records map every outcome to ``0.0``.
    """

    proportions: dict[Strategy, dict[Outcome, float]] = {}
    for strategy, row in counts.items():
        total = float(sum(row.values()))
        proportions[strategy] = {
            outcome: (round(count / total, decimals) if total > 0 else 0.0)
            for outcome, count in row.items()
        }
    return proportions


def play_batch(
    n: int = DEFAULT_N_ROUNDS,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> BatchResult:
    """Play ``n`` rounds and aggregate both strategies.

    Parameters
    ----------
    n : int, optional
        Number of rounds. Must be ``>= 1``.
    seed : int | None, optional
        Seed for a fresh generator, ``None`` or an integer ``>= 0``.
        Mutually exclusive with ``rng``.
    rng : numpy.random.Generator | None, optional
        Generator shared by all rounds.

    Returns
    -------
    BatchResult
        ``2 * n`` records plus contingency counts and row proportions.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is not an integer ``>= 1`` or ``seed`` is negative.
    ValueError
        If both ``seed`` and ``rng`` are given.
    """

    n_rounds = validate_n_rounds(n)
    seed = validate_seed(seed)
    if seed is not None and rng is not None:
        raise ValueError("pass either seed or rng, not both")

    generator = rng if rng is not None else make_rng(seed)
    rounds = [play_round(rng=generator) for _ in range(n_rounds)]
    return BatchResult.from_rounds(rounds)


def run_batch(config: SimulationConfig) -> BatchResult:
    """Run :func:`play_batch` from a :class:`SimulationConfig`."""

    return play_batch(config.n_rounds, seed=config.seed)


def merge_batches(*batches: BatchResult) -> BatchResult:
    """Concatenate batches into one result.

    Round indices are renumbered in argument order. Counts of the merged
    result equal the sum of the input counts.

    Raises
    ------
    InvalidArgumentError
        If no batch is given.
    """

    if not batches:
        raise InvalidArgumentError("merge_batches requires at least one batch")
    return BatchResult.from_rounds(
        [round_result for batch in batches for round_result in batch.rounds]
    )


__all__ = [
    "DEFAULT_N_ROUNDS",
    "OUTCOMES",
    "STRATEGIES",
    "SUMMARY_DECIMALS",
    "BatchResult",
    "SimulationConfig",
    "StrategyRecord",
    "contingency_counts",
    "merge_batches",
    "play_batch",
    "row_proportions",
    "run_batch",
    "validate_n_rounds",
]
