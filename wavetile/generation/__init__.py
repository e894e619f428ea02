"""Socket-constrained tile generation.

Cells start in superposition over every tile, placements fix cells, and a
worklist of restriction steps narrows neighbors until every cell is fixed.
"""

from .definition import TilesDefinition, SocketFn
from .cells import CellState, Fixed, Superposition, empty_propagation_grid
from .steps import Step, PlaceTile, RestrictNeighbor
from .propagation import apply_step, direction_between
from .selector import RandomPair, collapse_candidates, select_collapse
from .model import (
    Model,
    GenerationStatus,
    RandomRequest,
    Advanced,
    NeedsRandom,
    StepResult,
    WavetileError,
    StaleRandomRequestError,
    init,
    manual_place,
    step,
    advance,
    resume_with_random,
    is_solved,
    contradictions,
    status,
    run_to_completion,
    to_tiles,
    solve,
)
from .runner import StepRunner

__all__ = [
    "TilesDefinition",
    "SocketFn",
    "CellState",
    "Fixed",
    "Superposition",
    "empty_propagation_grid",
    "Step",
    "PlaceTile",
    "RestrictNeighbor",
    "apply_step",
    "direction_between",
    "RandomPair",
    "collapse_candidates",
    "select_collapse",
    "Model",
    "GenerationStatus",
    "RandomRequest",
    "Advanced",
    "NeedsRandom",
    "StepResult",
    "WavetileError",
    "StaleRandomRequestError",
    "init",
    "manual_place",
    "step",
    "advance",
    "resume_with_random",
    "is_solved",
    "contradictions",
    "status",
    "run_to_completion",
    "to_tiles",
    "solve",
    "StepRunner",
]
