"""Tests for TilesDefinition and cell states."""

import pytest
from pydantic import ValidationError

from wavetile.core.types import Direction
from wavetile.generation import Fixed, Superposition, TilesDefinition, empty_propagation_grid


class TestTilesDefinition:
    """Tests for TilesDefinition."""

    def test_tile_at_in_range(self, wall_sand: TilesDefinition):
        """Indices map to tiles in list order."""
        assert wall_sand.tile_at(0) == "wall"
        assert wall_sand.tile_at(1) == "sand"
        assert wall_sand.tile_count == 2

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_tile_at_out_of_range_falls_back(self, wall_sand: TilesDefinition, index):
        """Out-of-range indices give the default tile."""
        assert wall_sand.tile_at(index) == "?"

    def test_fits_uses_facing_sockets(self):
        """fits() compares A's edge with B's opposite edge."""
        # Tiles are (top, left, bottom, right) socket tuples
        order = [Direction.TOP, Direction.LEFT, Direction.BOTTOM, Direction.RIGHT]
        definition = TilesDefinition(
            tiles=(("a", "b", "c", "d"), ("c", "x", "x", "x")),
            default_tile=None,
            width=1,
            height=1,
            socket=lambda tile, d: tile[order.index(d)],
        )
        # Tile 1 on top of tile 0: tile 0's top "a" vs tile 1's bottom "x"
        assert not definition.fits(0, Direction.TOP, 1)
        # Tile 1 below tile 0: tile 0's bottom "c" vs tile 1's top "c"
        assert definition.fits(0, Direction.BOTTOM, 1)

    @pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 3)])
    def test_rejects_non_positive_size(self, make_definition, width, height):
        """Width and height must be positive."""
        with pytest.raises(ValidationError):
            make_definition(width, height)

    def test_rejects_empty_tile_list(self, make_definition):
        """A definition needs at least one tile."""
        with pytest.raises(ValidationError):
            make_definition(2, 2, tiles=())

    def test_rejects_non_callable_socket(self):
        """The socket function must be callable."""
        with pytest.raises(ValidationError):
            TilesDefinition(tiles=("a",), default_tile="a", width=1, height=1, socket="nope")


class TestCellStates:
    """Tests for Fixed and Superposition."""

    def test_full_superposition(self):
        """A fresh superposition holds every index."""
        cell = Superposition.full(4)
        assert cell.candidates == frozenset({0, 1, 2, 3})
        assert cell.count == 4
        assert not cell.is_contradiction

    def test_keep_narrows(self):
        """keep() only removes candidates."""
        cell = Superposition.full(5).keep(lambda i: i % 2 == 0)
        assert cell.candidates == frozenset({0, 2, 4})
        assert cell.ordered() == (0, 2, 4)

    def test_empty_is_contradiction(self):
        """Nothing left means contradiction, and it stays empty."""
        cell = Superposition.full(3).keep(lambda i: False)
        assert cell.is_contradiction
        assert cell.keep(lambda i: True).is_contradiction

    def test_tags(self):
        """Each state carries its type tag."""
        assert Fixed(tile_index=2).type == "fixed"
        assert Superposition.full(1).type == "superposition"

    def test_empty_propagation_grid(self):
        """Every cell starts in full superposition."""
        grid = empty_propagation_grid(3, 2, 4)
        assert len(grid) == 6
        assert all(cell == Superposition.full(4) for cell in grid.cells)
