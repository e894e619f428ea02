"""
Collapse selection.

When the worklist is empty and the grid is not solved yet, something has to
be decided. The selector picks the cell with the fewest remaining candidates
(the most constrained one, least likely to run out of options later) and one
of its candidates, using a pair of caller-supplied random numbers.

Ties between equally constrained cells are broken by the first random number,
the tile by the second. Both are reduced modulo the number of choices, so any
non-negative int works.
"""

from __future__ import annotations

from typing import NamedTuple

from wavetile.core.grid import Grid
from wavetile.core.types import Position
from .cells import CellState, Superposition
from .steps import PlaceTile


class RandomPair(NamedTuple):
    """The two draws consumed by one collapse."""

    position_random: int
    tile_random: int


def collapse_candidates(grid: Grid[CellState]) -> list[Position]:
    """
    Find the unfixed cells with the fewest candidates.

    Returns positions in row-major order. Empty when every cell is Fixed.
    A contradiction (zero candidates) always wins the minimum.
    """
    min_count: int | None = None
    candidates: list[Position] = []

    for pos, cell in zip(grid.positions(), grid.cells):
        if not isinstance(cell, Superposition):
            continue

        if min_count is None or cell.count < min_count:
            min_count = cell.count
            candidates = [pos]
        elif cell.count == min_count:
            candidates.append(pos)

    return candidates


def select_collapse(grid: Grid[CellState], pair: RandomPair) -> PlaceTile | None:
    """
    Choose the next placement, or None if there is nothing to place.

    None means either the grid is fully fixed or the chosen cell is a
    contradiction with no tile left to give it.
    """
    if pair.position_random < 0 or pair.tile_random < 0:
        raise ValueError(f"random draws must be non-negative, got {tuple(pair)}")

    positions = collapse_candidates(grid)
    if not positions:
        return None

    chosen = positions[pair.position_random % len(positions)]
    cell = grid.get(chosen)
    options = cell.ordered()
    if not options:
        return None

    return PlaceTile(position=chosen, tile_index=options[pair.tile_random % len(options)])
