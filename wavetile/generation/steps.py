"""Worklist steps.

A step is one queued unit of propagation work. Each step type is a frozen
Pydantic model with a type discriminator.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator

from wavetile.core.types import Position


class PlaceTile(BaseModel):
    """Fix the cell at position to tile_index."""

    model_config = ConfigDict(frozen=True)
    type: Literal["place_tile"] = "place_tile"

    position: Position
    tile_index: int


class RestrictNeighbor(BaseModel):
    """Narrow target's candidates to those that fit next to origin's tile."""

    model_config = ConfigDict(frozen=True)
    type: Literal["restrict_neighbor"] = "restrict_neighbor"

    origin: Position
    target: Position


Step = Annotated[Union[PlaceTile, RestrictNeighbor], Discriminator("type")]
