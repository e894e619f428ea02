"""
Generation model and its lifecycle.

A Model is one generation run: the propagation grid, the pending worklist,
the tiles definition, and the random generator state. Models are frozen;
every operation returns a new one.

Two ways to drive a run:

Synchronous, with the model's own seeded generator:
    model = init(definition)
    while not is_solved(model):
        model = step(model)

Or just:
    tiles = solve(definition)

Interactive, with randomness supplied from outside:
    result = advance(model)
    if isinstance(result, NeedsRandom):
        model = resume_with_random(model, result.request, pair)
    else:
        model = result.model

A contradiction (a cell with no candidates left) is not repaired. The run
stalls: the worklist empties, the selector keeps landing on the empty cell,
and nothing more is placed. status() reports it.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict

from wavetile.core.grid import Grid
from wavetile.core.types import Position
from wavetile.logging_config import get_logger, log_collapse, log_contradiction, log_step
from .cells import CellState, Fixed, Superposition, empty_propagation_grid
from .definition import TilesDefinition
from .propagation import apply_step
from .randomness import RandomState, draw_pair, seed_state
from .selector import RandomPair, select_collapse
from .steps import PlaceTile, Step

logger = get_logger(__name__)


class WavetileError(Exception):
    """Base exception for wavetile."""

    pass


class StaleRandomRequestError(WavetileError):
    """Random pair supplied for a request the model has moved past."""

    def __init__(self, request_step: int, model_step: int):
        self.request_step = request_step
        self.model_step = model_step
        super().__init__(
            f"Random request was issued at step {request_step}, model is at step {model_step}"
        )


class GenerationStatus(Enum):
    """Where a run stands."""
    RUNNING = auto()        # More steps will change the grid
    SOLVED = auto()         # Every cell is Fixed
    CONTRADICTION = auto()  # Some cell has no candidates; the run cannot finish


class Model(BaseModel):
    """One generation run."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    grid: Grid
    worklist: tuple[Step, ...] = ()
    definition: TilesDefinition
    rng_state: RandomState
    step_count: int = 0


class RandomRequest(BaseModel):
    """Token handed out when a step needs a random pair to continue."""

    model_config = ConfigDict(frozen=True)

    step_count: int


class Advanced(BaseModel):
    """The step completed without needing randomness."""

    model_config = ConfigDict(frozen=True)
    type: Literal["advanced"] = "advanced"

    model: Model


class NeedsRandom(BaseModel):
    """The step is waiting for a random pair; see resume_with_random()."""

    model_config = ConfigDict(frozen=True)
    type: Literal["needs_random"] = "needs_random"

    request: RandomRequest


StepResult = Union[Advanced, NeedsRandom]


# -----------------------------------------------------------------------------
# Lifecycle
# -----------------------------------------------------------------------------


def init(definition: TilesDefinition) -> Model:
    """Create a model with every cell in full superposition and no pending work."""
    logger.debug(
        f"INIT | {definition.width}x{definition.height} | {definition.tile_count} tiles"
        f" | seed={definition.seed}"
    )
    return Model(
        grid=empty_propagation_grid(definition.width, definition.height, definition.tile_count),
        definition=definition,
        rng_state=seed_state(definition.seed),
    )


def manual_place(model: Model, position: Position, tile_index: int) -> Model:
    """Queue a placement ahead of all pending work.

    The placement is not checked against the cell's candidates.
    """
    placement = PlaceTile(position=Position(*position), tile_index=tile_index)
    return model.model_copy(update={"worklist": (placement,) + model.worklist})


def is_solved(model: Model) -> bool:
    """True when every cell is Fixed.

    A superposition narrowed to one candidate still needs its own placement.
    """
    return all(isinstance(cell, Fixed) for cell in model.grid.cells)


def contradictions(model: Model) -> list[Position]:
    """Positions whose candidate sets are empty, in row-major order."""
    return [
        pos
        for pos, cell in zip(model.grid.positions(), model.grid.cells)
        if isinstance(cell, Superposition) and cell.is_contradiction
    ]


def status(model: Model) -> GenerationStatus:
    if is_solved(model):
        return GenerationStatus.SOLVED
    if contradictions(model):
        return GenerationStatus.CONTRADICTION
    return GenerationStatus.RUNNING


# -----------------------------------------------------------------------------
# Stepping
# -----------------------------------------------------------------------------


def _apply_next(model: Model) -> Model:
    """Pop the front step, apply it, append its follow-ups at the back."""
    current, rest = model.worklist[0], model.worklist[1:]
    grid, follow_ups = apply_step(model.grid, current, model.definition)
    log_step(logger, model.step_count, current.type, _describe(current))
    return model.model_copy(update={
        "grid": grid,
        "worklist": rest + follow_ups,
        "step_count": model.step_count + 1,
    })


def _collapse(model: Model, pair: RandomPair) -> Model:
    """Run the selector with pair and queue its placement, if any."""
    placement = select_collapse(model.grid, pair)
    if placement is None:
        log_contradiction(logger, model.step_count, contradictions(model))
        return model.model_copy(update={"step_count": model.step_count + 1})

    log_collapse(logger, model.step_count, placement.position, placement.tile_index)
    return model.model_copy(update={
        "worklist": model.worklist + (placement,),
        "step_count": model.step_count + 1,
    })


def step(model: Model) -> Model:
    """
    Advance the run by one unit of work, drawing from the model's generator.

    - Pending work: apply the front step.
    - No pending work, unsolved: draw one pair and collapse a cell.
    - Solved: return the model unchanged.
    """
    if model.worklist:
        return _apply_next(model)
    if is_solved(model):
        return model

    pair, rng_state = draw_pair(model.rng_state)
    return _collapse(model.model_copy(update={"rng_state": rng_state}), pair)


def advance(model: Model) -> StepResult:
    """Like step(), but asks the caller for randomness instead of drawing it."""
    if model.worklist:
        return Advanced(model=_apply_next(model))
    if is_solved(model):
        return Advanced(model=model)
    return NeedsRandom(request=RandomRequest(step_count=model.step_count))


def resume_with_random(model: Model, request: RandomRequest, pair: tuple[int, int]) -> Model:
    """Finish a collapse that advance() paused on.

    Raises:
        StaleRandomRequestError: If the model has changed since the request
    """
    if request.step_count != model.step_count:
        raise StaleRandomRequestError(request.step_count, model.step_count)
    return _collapse(model, RandomPair(*pair))


# -----------------------------------------------------------------------------
# Batch
# -----------------------------------------------------------------------------


def run_to_completion(model: Model) -> Model:
    """
    Step until nothing more can change.

    Stops once the grid is solved and the worklist has drained, or once a
    collapse comes back empty-handed (a contradiction stall).
    """
    while True:
        if model.worklist:
            model = step(model)
            continue
        if is_solved(model):
            return model

        model = step(model)
        if not model.worklist:
            return model


def to_tiles(model: Model) -> Grid[Any]:
    """Read the grid out as tiles; unfixed cells become the default tile."""
    definition = model.definition

    def tile_for(cell: CellState) -> Any:
        if isinstance(cell, Fixed):
            return definition.tile_at(cell.tile_index)
        return definition.default_tile

    return model.grid.map(tile_for)


def solve(definition: TilesDefinition) -> Grid[Any]:
    """Generate a full tile grid from a definition using its seed."""
    model = run_to_completion(init(definition))
    final = status(model)
    if final is GenerationStatus.SOLVED:
        logger.info(f"SOLVED | {definition.width}x{definition.height} in {model.step_count} steps")
    else:
        logger.warning(
            f"{final.name} | {definition.width}x{definition.height} after {model.step_count} steps,"
            f" unfixed cells fall back to the default tile"
        )
    return to_tiles(model)


def _describe(step_: Step) -> str:
    if isinstance(step_, PlaceTile):
        return f"({step_.position.x}, {step_.position.y}) <- {step_.tile_index}"
    return f"({step_.origin.x}, {step_.origin.y}) -> ({step_.target.x}, {step_.target.y})"
