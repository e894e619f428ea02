"""Core types for wavetile.

Pure data with no I/O: positions, directions, and the immutable Grid.

Usage:
    from wavetile.core import Position, Direction, Grid
"""

from .types import Position, Direction
from .grid import Grid
from .constants import MAX_RANDOM

__all__ = [
    "Position",
    "Direction",
    "Grid",
    "MAX_RANDOM",
]
