"""Simulation runtime: single rounds, batches, and random streams."""

from .engine import (
    BatchResult,
    SimulationConfig,
    StrategyRecord,
    merge_batches,
    play_batch,
    run_batch,
)
from .rng import make_rng, spawn_rngs
from .round import (
    RoundResult,
    StrategyResult,
    create_arrangement,
    decide_final_door,
    play_round,
    resolve_outcome,
    reveal_goat_door,
    select_initial_door,
)

__all__ = [
    "BatchResult",
    "RoundResult",
    "SimulationConfig",
    "StrategyRecord",
    "StrategyResult",
    "create_arrangement",
    "decide_final_door",
    "make_rng",
    "merge_batches",
    "play_batch",
    "play_round",
    "resolve_outcome",
    "reveal_goat_door",
    "run_batch",
    "select_initial_door",
    "spawn_rngs",
]
