"""Tabular I/O helpers for batch results."""

from .tabular import (
    read_strategy_records_csv,
    strategy_records,
    summary_records,
    write_records_csv,
    write_strategy_records_csv,
    write_summary_csv,
)

__all__ = [
    "read_strategy_records_csv",
    "strategy_records",
    "summary_records",
    "write_records_csv",
    "write_strategy_records_csv",
    "write_summary_csv",
]
