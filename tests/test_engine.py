"""Tests for the batch runner and aggregation helpers."""

from __future__ import annotations

import numpy as np
import pytest

from monty_hall import (
    BatchResult,
    InvalidArgumentError,
    Outcome,
    SimulationConfig,
    Strategy,
    merge_batches,
    play_batch,
    run_batch,
)
from monty_hall.runtime.engine import StrategyRecord, contingency_counts, row_proportions


def test_play_batch_returns_two_records_per_round() -> None:
    """A 100-round batch should produce 200 strategy records."""

    result = play_batch(100, seed=0)

    assert result.n_rounds == 100
    assert len(result.records) == 200
    assert [record.strategy for record in result.records[:4]] == [
        Strategy.STAY,
        Strategy.SWITCH,
        Strategy.STAY,
        Strategy.SWITCH,
    ]
    assert [record.round_index for record in result.records[:4]] == [0, 0, 1, 1]


def test_play_batch_default_size_is_one_hundred() -> None:
    """The default batch size should be 100 rounds."""

    assert play_batch(seed=3).n_rounds == 100


def test_play_batch_proportion_rows_sum_to_one() -> None:
    """Each strategy row should be normalized independently."""

    result = play_batch(100, seed=1)

    for strategy in (Strategy.STAY, Strategy.SWITCH):
        row = result.proportions[strategy]
        assert row[Outcome.WIN] + row[Outcome.LOSE] == pytest.approx(1.0, abs=0.011)
        assert sum(result.counts[strategy].values()) == 100


def test_play_batch_counts_are_complementary() -> None:
    """STAY wins exactly when SWITCH loses, so counts mirror each other."""

    result = play_batch(250, seed=2)

    assert result.counts[Strategy.STAY][Outcome.WIN] == result.counts[Strategy.SWITCH][Outcome.LOSE]
    assert result.counts[Strategy.STAY][Outcome.LOSE] == result.counts[Strategy.SWITCH][Outcome.WIN]


def test_play_batch_estimates_classic_probabilities() -> None:
    """Switching should win about 2/3 of the time and staying about 1/3."""

    result = play_batch(3000, seed=2024)

    assert result.win_rate(Strategy.STAY) == pytest.approx(1.0 / 3.0, abs=0.05)
    assert result.win_rate("switch") == pytest.approx(2.0 / 3.0, abs=0.05)


def test_play_batch_is_reproducible_with_seed() -> None:
    """The same seed should reproduce identical records."""

    first = play_batch(50, seed=7)
    second = play_batch(50, seed=7)

    assert first.records == second.records
    assert first.counts == second.counts


def test_play_batch_accepts_explicit_generator() -> None:
    """An injected generator should drive the batch like a seed does."""

    from_rng = play_batch(40, rng=np.random.default_rng(11))
    from_seed = play_batch(40, seed=11)

    assert from_rng.records == from_seed.records


@pytest.mark.parametrize("n", [0, -5, True, 2.5, "10"])
def test_play_batch_rejects_invalid_size(n) -> None:
    """Batch size must be an integer of at least one."""

    with pytest.raises(InvalidArgumentError):
        play_batch(n)


def test_play_batch_rejects_seed_and_rng_together() -> None:
    """Seed and generator are mutually exclusive."""

    with pytest.raises(ValueError, match="either seed or rng"):
        play_batch(10, seed=1, rng=np.random.default_rng(1))


def test_simulation_config_validates_and_runs() -> None:
    """SimulationConfig should validate size and drive run_batch."""

    with pytest.raises(InvalidArgumentError, match="n_rounds"):
        SimulationConfig(n_rounds=0)

    result = run_batch(SimulationConfig(n_rounds=30, seed=5))
    assert result.records == play_batch(30, seed=5).records


def test_merge_batches_sums_counts_and_renumbers_rounds() -> None:
    """Merged batches should carry summed counts and sequential round indices."""

    first = play_batch(20, seed=1)
    second = play_batch(30, seed=2)
    merged = merge_batches(first, second)

    assert merged.n_rounds == 50
    assert [record.round_index for record in merged.records[-2:]] == [49, 49]
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        for outcome in (Outcome.WIN, Outcome.LOSE):
            assert merged.counts[strategy][outcome] == (
                first.counts[strategy][outcome] + second.counts[strategy][outcome]
            )

    with pytest.raises(InvalidArgumentError):
        merge_batches()


def test_batch_result_requires_rounds() -> None:
    """An empty batch cannot be summarized."""

    with pytest.raises(InvalidArgumentError):
        BatchResult.from_rounds([])


def test_row_proportions_round_to_two_decimals() -> None:
    """Proportions should be row-normalized and rounded for reporting."""

    records = [
        StrategyRecord(round_index=0, strategy=Strategy.STAY, outcome=Outcome.WIN),
        StrategyRecord(round_index=1, strategy=Strategy.STAY, outcome=Outcome.LOSE),
        StrategyRecord(round_index=2, strategy=Strategy.STAY, outcome=Outcome.LOSE),
    ]
    counts = contingency_counts(records)
    proportions = row_proportions(counts)

    assert counts[Strategy.STAY] == {Outcome.LOSE: 2, Outcome.WIN: 1}
    assert proportions[Strategy.STAY] == {Outcome.LOSE: 0.67, Outcome.WIN: 0.33}
    assert proportions[Strategy.SWITCH] == {Outcome.LOSE: 0.0, Outcome.WIN: 0.0}


def test_format_summary_lists_both_strategies() -> None:
    """The printable summary should have a header and one row per strategy."""

    result = play_batch(60, seed=9)
    lines = result.format_summary().splitlines()

    assert len(lines) == 3
    assert lines[0].startswith("strategy")
    assert "LOSE" in lines[0] and "WIN" in lines[0]
    assert lines[1].startswith("stay")
    assert lines[2].startswith("switch")
    assert f"{result.proportions[Strategy.SWITCH][Outcome.WIN]:.2f}" in lines[2]


@pytest.mark.parametrize("seed", [-1, 1.5, "7", True])
def test_simulation_config_rejects_invalid_seed(seed) -> None:
    """Seeds must be None or non-negative integers, checked up front."""

    with pytest.raises(InvalidArgumentError, match="seed"):
        SimulationConfig(n_rounds=5, seed=seed)


def test_play_batch_rejects_negative_seed() -> None:
    """A negative seed should fail before any round is played."""

    with pytest.raises(InvalidArgumentError, match="seed must be >= 0"):
        play_batch(5, seed=-1)


def test_play_batch_accepts_numpy_integer_seed() -> None:
    """NumPy integer seeds should behave like plain integer seeds."""

    assert play_batch(10, seed=np.int64(4)).records == play_batch(10, seed=4).records
