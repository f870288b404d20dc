"""CSV export/import for batch results.

Two flat views of a :class:`~monty_hall.runtime.engine.BatchResult` are
provided: one row per strategy per round, and one summary row per strategy.
"""

from __future__ import annotations

import csv
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from monty_hall.core.game import Outcome, Strategy
from monty_hall.runtime.engine import OUTCOMES, STRATEGIES, BatchResult, StrategyRecord

_RECORD_COLUMNS = (
    "round_index",
    "strategy",
    "outcome",
    "initial_pick",
    "revealed_door",
    "final_door",
    "prize_door",
)

_REQUIRED_RECORD_COLUMNS = ("round_index", "strategy", "outcome")


def strategy_records(result: BatchResult) -> list[dict[str, Any]]:
    """Flatten a batch into one row per strategy per round.

    Parameters
    ----------
    result : BatchResult
        Batch to flatten.

    Returns
    -------
    list[dict[str, Any]]
        ``2 * n_rounds`` rows keyed by ``_RECORD_COLUMNS``.
    """

    rows: list[dict[str, Any]] = []
    for round_index, round_result in enumerate(result.rounds):
        for strategy_result in round_result.records():
            rows.append(
                {
                    "round_index": round_index,
                    "strategy": strategy_result.strategy.value,
                    "outcome": strategy_result.outcome.value,
                    "initial_pick": round_result.initial_pick,
                    "revealed_door": round_result.revealed_door,
                    "final_door": strategy_result.final_door,
                    "prize_door": round_result.arrangement.prize_door,
                }
            )
    return rows


def summary_records(result: BatchResult) -> list[dict[str, Any]]:
    """Return one row per strategy with counts and rounded proportions."""

    rows: list[dict[str, Any]] = []
    for strategy in STRATEGIES:
        row: dict[str, Any] = {"strategy": strategy.value}
        for outcome in reversed(OUTCOMES):
            row[f"n_{outcome.value.lower()}"] = int(result.counts[strategy][outcome])
        for outcome in reversed(OUTCOMES):
            row[f"p_{outcome.value.lower()}"] = float(result.proportions[strategy][outcome])
        rows.append(row)
    return rows


def write_records_csv(
    rows: list[dict[str, Any]],
    path: str | Path,
    *,
    fieldnames: Sequence[str] | None = None,
) -> Path:
    """Write row dictionaries to CSV.

    Parameters
    ----------
    rows : list[dict[str, Any]]
        Row dictionaries to write.
    path : str | pathlib.Path
        Destination CSV path.
    fieldnames : Sequence[str] | None, optional
        Column order. When ``None``, columns follow first-seen key order
        across ``rows``.

    Raises
    ------
    ValueError
        If ``rows`` is empty.
    """

    if not rows:
        raise ValueError("rows must not be empty")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if fieldnames is None:
        columns: list[str] = []
        for row in rows:
            for key in row:
                if key not in columns:
                    columns.append(str(key))
    else:
        columns = list(fieldnames)

    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=columns)
        writer.writeheader()
        writer.writerows(rows)
    return output_path


def write_strategy_records_csv(result: BatchResult, path: str | Path) -> Path:
    """Serialize per-round strategy records as CSV."""

    return write_records_csv(strategy_records(result), path, fieldnames=_RECORD_COLUMNS)


def write_summary_csv(result: BatchResult, path: str | Path) -> Path:
    """Serialize the per-strategy summary as CSV."""

    return write_records_csv(summary_records(result), path)


def read_strategy_records_csv(path: str | Path) -> tuple[StrategyRecord, ...]:
    """Read strategy records written by :func:`write_strategy_records_csv`.

    Parameters
    ----------
    path : str | pathlib.Path
        Input CSV path.

    Returns
    -------
    tuple[StrategyRecord, ...]
        Records in file order.

    Raises
    ------
    ValueError
        If required columns are missing or a row holds an invalid value.
    """

    input_path = Path(path)
    with input_path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        _require_columns(reader.fieldnames, required=_REQUIRED_RECORD_COLUMNS)
        return tuple(
            _record_from_csv_mapping(raw, row_index=index)
            for index, raw in enumerate(reader)
        )


def _record_from_csv_mapping(raw: dict[str, str], *, row_index: int) -> StrategyRecord:
    """Parse one CSV row into a :class:`StrategyRecord`."""

    try:
        return StrategyRecord(
            round_index=int(raw["round_index"]),
            strategy=Strategy(raw["strategy"]),
            outcome=Outcome(raw["outcome"]),
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"row {row_index}: invalid strategy record: {exc}") from exc


def _require_columns(fieldnames: Any, *, required: tuple[str, ...]) -> None:
    """Fail if CSV header does not include required columns."""

    present = set(fieldnames or ())
    missing = [column for column in required if column not in present]
    if missing:
        raise ValueError(f"CSV is missing required columns: {missing}")


__all__ = [
    "read_strategy_records_csv",
    "strategy_records",
    "summary_records",
    "write_records_csv",
    "write_strategy_records_csv",
    "write_summary_csv",
]
