"""Config-driven batch runs.

A config is a mapping with optional ``n_rounds`` and ``seed`` entries, loaded
from JSON or YAML or passed directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from monty_hall.core import load_config_mapping
from monty_hall.core.config_validation import optional_int, validate_allowed_keys
from monty_hall.runtime.engine import DEFAULT_N_ROUNDS, BatchResult, SimulationConfig, run_batch

CONFIG_KEYS: tuple[str, ...] = ("n_rounds", "seed")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a simulation config file (`.json`, `.yaml`, or `.yml`)."""

    return load_config_mapping(path)


def simulation_config_from_mapping(config: Mapping[str, Any]) -> SimulationConfig:
    """Build a :class:`SimulationConfig` from a declarative mapping.

    Parameters
    ----------
    config : Mapping[str, Any]
        Mapping with optional ``n_rounds`` and ``seed`` entries.

    Returns
    -------
    SimulationConfig
        Validated runtime configuration.

    Raises
    ------
    ValueError
        If unknown keys are present or values have the wrong type.
    InvalidArgumentError
        If ``n_rounds`` is smaller than one.
    """

    validate_allowed_keys(config, field_name="config", allowed_keys=CONFIG_KEYS)
    n_rounds = optional_int(config, "n_rounds", field_name="config", default=DEFAULT_N_ROUNDS)
    seed = optional_int(config, "seed", field_name="config")
    return SimulationConfig(n_rounds=n_rounds, seed=seed)


def run_batch_from_config(config: Mapping[str, Any]) -> BatchResult:
    """Run one batch from a declarative mapping."""

    return run_batch(simulation_config_from_mapping(config))


__all__ = [
    "CONFIG_KEYS",
    "load_config",
    "run_batch_from_config",
    "simulation_config_from_mapping",
]
