"""
Tile catalogs loaded from YAML.

A catalog is the caller-side half of a generation run: the tiles, how to
draw them, and the socket on each of their edges. The engine never sees
this structure directly; catalog_definition() wraps it in a TilesDefinition
whose socket function reads the edge table.

File format:

    default: sand            # optional, fallback tile name (default: first tile)
    tiles:
      - name: sand
        symbol: "."
        color: yellow
        sockets: {top: SS, left: SS, bottom: SS, right: SS}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from wavetile.core.constants import DEFAULT_CATALOG_PATH
from wavetile.core.types import Direction
from wavetile.generation.definition import TilesDefinition
from wavetile.generation.model import WavetileError
from wavetile.logging_config import get_logger

logger = get_logger(__name__)


class CatalogError(WavetileError):
    """Catalog file missing or malformed."""

    pass


class CatalogTile(BaseModel):
    """One tile type with its edge sockets."""

    model_config = ConfigDict(frozen=True)

    name: str
    symbol: str = "?"
    color: str = "white"
    sockets: dict[Direction, str]

    @model_validator(mode="after")
    def check_all_edges(self) -> CatalogTile:
        missing = [d.value for d in Direction if d not in self.sockets]
        if missing:
            raise ValueError(f"tile '{self.name}' has no socket for {', '.join(missing)}")
        return self

    def socket(self, direction: Direction) -> str:
        return self.sockets[direction]


class Catalog(BaseModel):
    """An ordered tile list plus the fallback tile."""

    model_config = ConfigDict(frozen=True)

    tiles: tuple[CatalogTile, ...] = Field(min_length=1)
    default: str | None = None

    @model_validator(mode="after")
    def check_names(self) -> Catalog:
        names = [tile.name for tile in self.tiles]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate tile names: {', '.join(duplicates)}")
        if self.default is not None and self.default not in names:
            raise ValueError(f"default tile '{self.default}' is not in the catalog")
        return self

    @property
    def default_tile(self) -> CatalogTile:
        if self.default is None:
            return self.tiles[0]
        return self.by_name(self.default)

    def by_name(self, name: str) -> CatalogTile:
        """Look up a tile by name.

        Raises:
            KeyError: If no tile has that name
        """
        for tile in self.tiles:
            if tile.name == name:
                return tile
        raise KeyError(name)

    def index_of(self, name: str) -> int:
        """Tile index of a named tile, for manual placements.

        Raises:
            KeyError: If no tile has that name
        """
        for index, tile in enumerate(self.tiles):
            if tile.name == name:
                return index
        raise KeyError(name)


def tile_socket(tile: CatalogTile, direction: Direction) -> str:
    """Socket function for catalog tiles."""
    return tile.socket(direction)


def parse_catalog(data: Any) -> Catalog:
    """Build a Catalog from already-parsed YAML data.

    Raises:
        CatalogError: If the data does not describe a valid catalog
    """
    if not isinstance(data, dict) or "tiles" not in data:
        raise CatalogError("catalog must be a mapping with a 'tiles' list")
    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"invalid catalog: {e}") from e


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Load a catalog from a YAML file.

    Args:
        path: Catalog file. If None, uses the bundled sand/wall catalog.

    Raises:
        CatalogError: If the file is missing, not YAML, or not a valid catalog
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    if not catalog_path.exists():
        raise CatalogError(f"catalog file not found: {catalog_path}")

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"could not parse {catalog_path}: {e}") from e

    catalog = parse_catalog(data)
    logger.debug(f"Loaded {len(catalog.tiles)} tiles from {catalog_path}")
    return catalog


def catalog_definition(catalog: Catalog, width: int, height: int, seed: int = 0) -> TilesDefinition:
    """Wrap a catalog as the TilesDefinition for one run."""
    return TilesDefinition(
        tiles=catalog.tiles,
        default_tile=catalog.default_tile,
        width=width,
        height=height,
        socket=tile_socket,
        seed=seed,
    )
