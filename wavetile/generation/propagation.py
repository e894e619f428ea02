"""
Constraint propagation for the worklist engine.

apply_step() takes one step off the worklist and returns the updated grid
plus any follow-up steps. Placing a tile fixes a cell and queues a
restriction for each of its four neighbors; a restriction narrows the
neighbor's candidates to the tiles whose facing socket matches.

Restrictions only ever remove candidates, so the order in which pending
steps are applied changes intermediate states but not where the grid ends
up. The engine drains the worklist first-in first-out, which spreads each
placement outward like a ripple.
"""

from __future__ import annotations

from wavetile.core.grid import Grid
from wavetile.core.types import Direction, Position
from wavetile.logging_config import get_logger
from .cells import CellState, Fixed, Superposition
from .definition import TilesDefinition
from .steps import PlaceTile, RestrictNeighbor, Step

logger = get_logger(__name__)

# Neighbor order for restrictions queued after a placement
NEIGHBOR_ORDER = (Direction.TOP, Direction.LEFT, Direction.BOTTOM, Direction.RIGHT)


def direction_between(origin: Position, target: Position) -> Direction:
    """Direction of target as seen from origin.

    Only meaningful for axis-aligned neighbors; anything else lands on LEFT.
    """
    if target.x > origin.x:
        return Direction.RIGHT
    if target.y > origin.y:
        return Direction.BOTTOM
    if target.y < origin.y:
        return Direction.TOP
    return Direction.LEFT


def apply_step(
    grid: Grid[CellState],
    step: Step,
    definition: TilesDefinition,
) -> tuple[Grid[CellState], tuple[Step, ...]]:
    """Apply one step and return (new grid, follow-up steps)."""
    if isinstance(step, PlaceTile):
        return _place_tile(grid, step)
    return _restrict_neighbor(grid, step, definition)


def _place_tile(grid: Grid[CellState], step: PlaceTile) -> tuple[Grid[CellState], tuple[Step, ...]]:
    """Fix the cell, whatever it held before.

    Out-of-grid neighbors still get a restriction step; those are no-ops
    when they come up.
    """
    new_grid = grid.set(step.position, Fixed(tile_index=step.tile_index))
    follow_ups = tuple(
        RestrictNeighbor(origin=step.position, target=step.position + direction)
        for direction in NEIGHBOR_ORDER
    )
    return new_grid, follow_ups


def _restrict_neighbor(
    grid: Grid[CellState],
    step: RestrictNeighbor,
    definition: TilesDefinition,
) -> tuple[Grid[CellState], tuple[Step, ...]]:
    origin = grid.get(step.origin)
    target = grid.get(step.target)

    if not isinstance(origin, Fixed) or not isinstance(target, Superposition):
        return grid, ()

    direction = direction_between(step.origin, step.target)
    narrowed = target.keep(
        lambda candidate: definition.fits(origin.tile_index, direction, candidate)
    )

    if narrowed.is_contradiction and not target.is_contradiction:
        logger.warning(
            f"CONTRADICTION | ({step.target.x}, {step.target.y}) has no candidates left"
            f" beside tile {origin.tile_index} at ({step.origin.x}, {step.origin.y})"
        )

    return grid.set(step.target, narrowed), ()
