"""Tile catalogs: YAML-defined tiles with edge sockets."""

from .loader import (
    Catalog,
    CatalogTile,
    CatalogError,
    tile_socket,
    parse_catalog,
    load_catalog,
    catalog_definition,
)

__all__ = [
    "Catalog",
    "CatalogTile",
    "CatalogError",
    "tile_socket",
    "parse_catalog",
    "load_catalog",
    "catalog_definition",
]
