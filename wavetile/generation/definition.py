"""
Tile catalog and adjacency function.

A TilesDefinition is everything the engine needs from the caller: an ordered
list of tiles (a tile's position in the list is its index everywhere in the
engine), a fallback tile, the grid size, a seed, and a socket function.

The socket function is the whole adjacency model. It maps (tile, direction)
to a socket value describing that edge; tile B may sit on tile A's `d` side
exactly when socket(A, d) == socket(B, d.opposite). Tiles themselves are
opaque to the engine.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable

from pydantic import BaseModel, ConfigDict, Field

from wavetile.core.types import Direction

SocketFn = Callable[[Any, Direction], Hashable]


class TilesDefinition(BaseModel):
    """Caller-supplied configuration for one generation run."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tiles: tuple[Any, ...] = Field(min_length=1)
    default_tile: Any
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    socket: SocketFn
    seed: int = 0

    @property
    def tile_count(self) -> int:
        return len(self.tiles)

    def tile_at(self, index: int) -> Any:
        """Get the tile at index, falling back to the default tile."""
        if 0 <= index < len(self.tiles):
            return self.tiles[index]
        return self.default_tile

    def socket_of(self, index: int, direction: Direction) -> Hashable:
        """Socket of the tile at index on the given edge."""
        return self.socket(self.tile_at(index), direction)

    def fits(self, index: int, direction: Direction, neighbor_index: int) -> bool:
        """Check whether neighbor_index may sit on the `direction` side of index."""
        return self.socket_of(index, direction) == self.socket_of(neighbor_index, direction.opposite)
