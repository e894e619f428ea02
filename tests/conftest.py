"""Shared pytest fixtures for wavetile tests."""

import tempfile
from pathlib import Path

import pytest

from wavetile.catalog import Catalog, load_catalog
from wavetile.core.types import Direction
from wavetile.generation import TilesDefinition


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped by default, run with --run-slow)")


def pytest_addoption(parser):
    """Add --run-slow option to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests (skipped by default)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="Slow test (use --run-slow to run)")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


# =============================================================================
# Socket functions
# =============================================================================


def same_on_every_edge(tile: str, direction: Direction) -> str:
    """Every edge of a tile shows the tile's own name."""
    return tile


# =============================================================================
# Definitions
# =============================================================================


@pytest.fixture
def make_definition():
    """Factory for wall/sand definitions of any size."""

    def _make(width: int, height: int, seed: int = 0, tiles: tuple = ("wall", "sand")) -> TilesDefinition:
        return TilesDefinition(
            tiles=tiles,
            default_tile="?",
            width=width,
            height=height,
            socket=same_on_every_edge,
            seed=seed,
        )

    return _make


@pytest.fixture
def wall_sand(make_definition) -> TilesDefinition:
    """Two tiles on a 2x1 board. Wall only touches wall, sand only sand."""
    return make_definition(2, 1)


@pytest.fixture
def sand_walls_catalog() -> Catalog:
    """The bundled ten-tile sand/wall catalog."""
    return load_catalog()


@pytest.fixture
def temp_data_dir() -> Path:
    """Create a temporary data directory for tests."""
    with tempfile.TemporaryDirectory(prefix="wavetile_test_") as tmpdir:
        yield Path(tmpdir)
