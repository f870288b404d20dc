"""Tests for CSV export/import of batch results."""

from __future__ import annotations

import csv

import pytest

from monty_hall import play_batch
from monty_hall.io import (
    read_strategy_records_csv,
    strategy_records,
    summary_records,
    write_records_csv,
    write_strategy_records_csv,
    write_summary_csv,
)


def test_strategy_records_include_round_details() -> None:
    """Flat records should carry round state next to each strategy result."""

    result = play_batch(10, seed=0)
    rows = strategy_records(result)

    assert len(rows) == 20
    first_round = result.rounds[0]
    assert rows[0]["strategy"] == "stay"
    assert rows[1]["strategy"] == "switch"
    assert rows[0]["initial_pick"] == first_round.initial_pick
    assert rows[1]["revealed_door"] == first_round.revealed_door
    assert rows[0]["prize_door"] == first_round.arrangement.prize_door
    assert rows[1]["final_door"] == first_round.switch.final_door


def test_strategy_records_csv_round_trip(tmp_path) -> None:
    """Written strategy records should read back as identical records."""

    result = play_batch(15, seed=4)
    path = write_strategy_records_csv(result, tmp_path / "nested" / "records.csv")

    assert path.exists()
    assert read_strategy_records_csv(path) == result.records


def test_summary_records_match_counts(tmp_path) -> None:
    """Summary rows should mirror counts and proportions per strategy."""

    result = play_batch(80, seed=6)
    rows = summary_records(result)

    assert [row["strategy"] for row in rows] == ["stay", "switch"]
    for row in rows:
        assert row["n_win"] + row["n_lose"] == 80
        assert row["p_win"] + row["p_lose"] == pytest.approx(1.0, abs=0.011)

    path = write_summary_csv(result, tmp_path / "summary.csv")
    with path.open("r", encoding="utf-8", newline="") as handle:
        loaded = list(csv.DictReader(handle))
    assert [row["strategy"] for row in loaded] == ["stay", "switch"]
    assert list(loaded[0]) == ["strategy", "n_win", "n_lose", "p_win", "p_lose"]


def test_write_records_csv_rejects_empty_rows(tmp_path) -> None:
    """Writing an empty row list is an error."""

    with pytest.raises(ValueError, match="rows must not be empty"):
        write_records_csv([], tmp_path / "empty.csv")


def test_read_strategy_records_requires_columns(tmp_path) -> None:
    """Reader should fail when required columns are missing."""

    path = tmp_path / "bad.csv"
    path.write_text("round_index,strategy\n0,stay\n", encoding="utf-8")

    with pytest.raises(ValueError, match="missing required columns"):
        read_strategy_records_csv(path)


def test_read_strategy_records_reports_bad_row(tmp_path) -> None:
    """Reader should name the offending row on invalid values."""

    path = tmp_path / "bad.csv"
    path.write_text("round_index,strategy,outcome\n0,stay,WIN\n1,wander,LOSE\n", encoding="utf-8")

    with pytest.raises(ValueError, match="row 1"):
        read_strategy_records_csv(path)


def test_strategy_records_csv_uses_fixed_column_order(tmp_path) -> None:
    """Record CSV headers should follow the declared column order."""

    path = write_strategy_records_csv(play_batch(3, seed=1), tmp_path / "records.csv")
    header = path.read_text(encoding="utf-8").splitlines()[0]

    assert header.split(",") == [
        "round_index",
        "strategy",
        "outcome",
        "initial_pick",
        "revealed_door",
        "final_door",
        "prize_door",
    ]


def test_write_records_csv_honors_explicit_fieldnames(tmp_path) -> None:
    """Explicit fieldnames should override first-seen key order."""

    path = write_records_csv([{"b": 1, "a": 2}], tmp_path / "rows.csv", fieldnames=("a", "b"))

    assert path.read_text(encoding="utf-8").splitlines() == ["a,b", "2,1"]
