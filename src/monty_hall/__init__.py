"""Top-level package for ``monty_hall``.

The package simulates the Monty Hall game and estimates win rates:

1. :func:`~monty_hall.runtime.round.play_round` plays one round and scores
   both the STAY and SWITCH strategies on the same hidden arrangement,
2. :func:`~monty_hall.runtime.engine.play_batch` repeats rounds and tabulates
   strategy × outcome counts and row proportions.

Every random step takes an explicit :class:`numpy.random.Generator`, so runs
are reproducible from a seed.
"""

from .config import load_config, run_batch_from_config
from .core import (
    DOORS,
    Arrangement,
    DoorContent,
    InvalidArgumentError,
    InvalidIndexError,
    Outcome,
    Strategy,
)
from .runtime import (
    BatchResult,
    RoundResult,
    SimulationConfig,
    StrategyRecord,
    StrategyResult,
    create_arrangement,
    decide_final_door,
    make_rng,
    merge_batches,
    play_batch,
    play_round,
    resolve_outcome,
    reveal_goat_door,
    run_batch,
    select_initial_door,
    spawn_rngs,
)

__all__ = [
    "DOORS",
    "Arrangement",
    "BatchResult",
    "DoorContent",
    "InvalidArgumentError",
    "InvalidIndexError",
    "Outcome",
    "RoundResult",
    "SimulationConfig",
    "Strategy",
    "StrategyRecord",
    "StrategyResult",
    "create_arrangement",
    "decide_final_door",
    "load_config",
    "make_rng",
    "merge_batches",
    "play_batch",
    "play_round",
    "resolve_outcome",
    "reveal_goat_door",
    "run_batch",
    "run_batch_from_config",
    "select_initial_door",
    "spawn_rngs",
]
