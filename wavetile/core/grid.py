"""Dense 2D grid for wavetile.

The grid is immutable: set() returns a new grid and never touches the
original, so earlier snapshots stay valid while a run moves on. Cells are
stored row-major in a flat tuple.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import Position

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


class Grid(BaseModel, Generic[T]):
    """A width x height block of cells, generic over the cell type.

    Reads outside the grid return None and writes outside it are ignored;
    neither raises.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    cells: tuple[T, ...]

    @model_validator(mode="after")
    def check_cell_count(self) -> Grid[T]:
        expected = self.width * self.height
        if len(self.cells) != expected:
            raise ValueError(
                f"grid of {self.width}x{self.height} needs {expected} cells, got {len(self.cells)}"
            )
        return self

    @classmethod
    def repeat(cls, width: int, height: int, value: T) -> Grid[T]:
        """Create a grid with every cell set to value."""
        return cls(width=width, height=height, cells=(value,) * (width * height))

    def __len__(self) -> int:
        return len(self.cells)

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position is within grid bounds."""
        return 0 <= pos[0] < self.width and 0 <= pos[1] < self.height

    def _index(self, pos: Position) -> int:
        return pos[1] * self.width + pos[0]

    def get(self, pos: Position) -> T | None:
        """Get the cell at a position, or None if out of bounds."""
        if not self.in_bounds(pos):
            return None
        return self.cells[self._index(pos)]

    def set(self, pos: Position, value: T) -> Grid[T]:
        """Return a new grid with the cell at pos replaced.

        Out of bounds positions leave the grid unchanged.
        """
        if not self.in_bounds(pos):
            return self
        index = self._index(pos)
        new_cells = self.cells[:index] + (value,) + self.cells[index + 1:]
        return self.model_copy(update={"cells": new_cells})

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def map(self, f: Callable[[T], U]) -> Grid[U]:
        """Apply f to every cell, keeping the shape."""
        return self.model_copy(update={"cells": tuple(f(cell) for cell in self.cells)})

    def indexed_map(self, f: Callable[[Position, T], U]) -> Grid[U]:
        """Apply f to every (position, cell) pair, keeping the shape."""
        return self.model_copy(
            update={"cells": tuple(f(pos, cell) for pos, cell in zip(self.positions(), self.cells))}
        )

    def fold(self, f: Callable[[A, T], A], initial: A) -> A:
        """Fold f over all cells in row-major order."""
        return reduce(f, self.cells, initial)

    def rows(self) -> tuple[tuple[T, ...], ...]:
        """Split the cells into rows, top to bottom. For display."""
        return tuple(
            self.cells[y * self.width:(y + 1) * self.width]
            for y in range(self.height)
        )
