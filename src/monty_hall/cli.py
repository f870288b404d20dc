"""Command-line entry point for batch simulations."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Sequence

from .config import load_config, simulation_config_from_mapping
from .io.tabular import summary_records, write_strategy_records_csv, write_summary_csv
from .runtime.engine import run_batch


def run_simulation_cli(argv: Sequence[str] | None = None) -> int:
    """Run one batch and print the STAY/SWITCH proportion table.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` on success).
    """

    parser = argparse.ArgumentParser(
        description="Estimate Monty Hall STAY/SWITCH win rates by simulation."
    )
    parser.add_argument("--config", default=None, help="Optional JSON or YAML config path.")
    parser.add_argument(
        "--n-rounds",
        type=_positive_int,
        default=None,
        help="Number of rounds to simulate. Overrides the config value (default 100).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed. Overrides the config value.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for CSV/JSON outputs. Nothing is written when omitted.",
    )
    parser.add_argument(
        "--prefix",
        default="monty_hall",
        help="Output filename prefix.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    raw_config: dict[str, Any] = load_config(args.config) if args.config is not None else {}
    if args.n_rounds is not None:
        raw_config["n_rounds"] = args.n_rounds
    if args.seed is not None:
        raw_config["seed"] = args.seed

    try:
        config = simulation_config_from_mapping(raw_config)
    except ValueError as exc:
        parser.error(str(exc))

    result = run_batch(config)
    print(f"Simulated {result.n_rounds} rounds (seed={config.seed})")
    print(result.format_summary())

    if args.output_dir is None:
        return 0

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    prefix = str(args.prefix)
    records_path = write_strategy_records_csv(result, output_dir / f"{prefix}_records.csv")
    summary_path = write_summary_csv(result, output_dir / f"{prefix}_summary.csv")
    json_path = _write_json_summary(
        output_dir / f"{prefix}_summary.json",
        {
            "n_rounds": result.n_rounds,
            "seed": config.seed,
            "summary": summary_records(result),
        },
    )
    print(f"Records CSV: {records_path}")
    print(f"Summary CSV: {summary_path}")
    print(f"Summary JSON: {json_path}")
    return 0


def _positive_int(value: str) -> int:
    """argparse type for integers ``>= 1``."""

    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {parsed}")
    return parsed


def _write_json_summary(path: Path, payload: dict[str, Any]) -> Path:
    """Write summary JSON payload to disk."""

    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    return path


def main() -> None:
    """Execute the simulation CLI and exit with returned code."""

    raise SystemExit(run_simulation_cli())


if __name__ == "__main__":
    main()


__all__ = ["main", "run_simulation_cli"]
