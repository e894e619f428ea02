"""Cell states for the propagation grid.

Every cell is either Fixed to one tile index or in Superposition over a set
of candidate indices. A Superposition only ever loses candidates; one that
has lost all of them is a contradiction and stays that way.
"""

from __future__ import annotations

from typing import Annotated, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator

from wavetile.core.grid import Grid


class Fixed(BaseModel):
    """A cell committed to a single tile."""

    model_config = ConfigDict(frozen=True)
    type: Literal["fixed"] = "fixed"

    tile_index: int


class Superposition(BaseModel):
    """A cell that could still be any of its candidate tiles."""

    model_config = ConfigDict(frozen=True)
    type: Literal["superposition"] = "superposition"

    candidates: frozenset[int]

    @classmethod
    def full(cls, tile_count: int) -> Superposition:
        """Every tile index is still possible."""
        return cls(candidates=frozenset(range(tile_count)))

    @property
    def count(self) -> int:
        return len(self.candidates)

    @property
    def is_contradiction(self) -> bool:
        return not self.candidates

    def ordered(self) -> tuple[int, ...]:
        """Candidates in ascending index order."""
        return tuple(sorted(self.candidates))

    def keep(self, predicate: Callable[[int], bool]) -> Superposition:
        """Return a superposition holding only the candidates that pass predicate."""
        return self.model_copy(
            update={"candidates": frozenset(c for c in self.candidates if predicate(c))}
        )


CellState = Annotated[Union[Fixed, Superposition], Discriminator("type")]


def empty_propagation_grid(width: int, height: int, tile_count: int) -> Grid[CellState]:
    """Create a grid with every cell in full superposition."""
    return Grid.repeat(width, height, Superposition.full(tile_count))
