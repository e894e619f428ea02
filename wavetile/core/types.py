"""Foundational types for wavetile.

This module defines the core types used throughout the system:
- Position: Grid coordinates (x, y)
- Direction: The four tile edges with offsets and opposites
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """The four edges of a tile, and the neighbor lying across each edge."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """Get the (dx, dy) offset for this direction.

        Coordinate system: x increases to the right, y increases downward.
        """
        return _DIRECTION_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        """Get the opposite direction."""
        return _DIRECTION_OPPOSITES[self]


# Lookup tables for Direction properties
_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.TOP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.BOTTOM: (0, 1),
    Direction.RIGHT: (1, 0),
}

_DIRECTION_OPPOSITES: dict[Direction, Direction] = {
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    """A cell position in the grid.

    (0, 0) is the top-left cell; x grows to the right, y grows downward.
    """

    x: int
    y: int

    def __add__(self, other: object) -> Position:
        """Add a direction offset or tuple to this position."""
        if isinstance(other, Direction):
            dx, dy = other.offset
            return Position(self.x + dx, self.y + dy)
        if isinstance(other, tuple) and len(other) == 2:
            return Position(self.x + other[0], self.y + other[1])
        return NotImplemented

    def neighbors(self) -> dict[Direction, Position]:
        """Get all adjacent positions keyed by direction.

        Positions outside any grid are included; callers decide what to do
        with them.
        """
        return {d: self + d for d in Direction}

    def in_bounds(self, width: int, height: int) -> bool:
        """Check if position is within grid bounds (0 to width-1, 0 to height-1)."""
        return 0 <= self.x < width and 0 <= self.y < height
