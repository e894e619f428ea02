"""Tests for the immutable Grid."""

import pytest
from pydantic import ValidationError

from wavetile.core import Grid, Position


@pytest.fixture
def numbered() -> Grid:
    """3x2 grid holding 0..5 in row-major order."""
    return Grid(width=3, height=2, cells=(0, 1, 2, 3, 4, 5))


class TestConstruction:
    """Tests for creating grids."""

    def test_repeat(self):
        """repeat() fills every cell with the same value."""
        grid = Grid.repeat(4, 3, "x")
        assert grid.width == 4
        assert grid.height == 3
        assert len(grid) == 12
        assert all(cell == "x" for cell in grid.cells)

    def test_cell_count_must_match(self):
        """A cell tuple of the wrong length is rejected."""
        with pytest.raises(ValidationError):
            Grid(width=2, height=2, cells=(1, 2, 3))

    @pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
    def test_dimensions_must_be_positive(self, width, height):
        """Zero or negative sizes are rejected."""
        with pytest.raises(ValidationError):
            Grid.repeat(width, height, 0)

    def test_grid_is_frozen(self, numbered: Grid):
        """Grid is immutable."""
        with pytest.raises(Exception):  # Pydantic ValidationError
            numbered.width = 10


class TestAccess:
    """Tests for get() and set()."""

    def test_get_row_major(self, numbered: Grid):
        """Cells are stored row by row."""
        assert numbered.get(Position(0, 0)) == 0
        assert numbered.get(Position(2, 0)) == 2
        assert numbered.get(Position(0, 1)) == 3
        assert numbered.get(Position(2, 1)) == 5

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 2), (10, 10)])
    def test_get_out_of_bounds_is_none(self, numbered: Grid, pos):
        """Reads outside the grid return None instead of raising."""
        assert numbered.get(Position(*pos)) is None

    def test_set_returns_new_grid(self, numbered: Grid):
        """set() leaves the original untouched."""
        updated = numbered.set(Position(1, 1), 99)
        assert updated.get(Position(1, 1)) == 99
        assert numbered.get(Position(1, 1)) == 4
        assert updated.cells == (0, 1, 2, 3, 99, 5)

    def test_set_out_of_bounds_is_noop(self, numbered: Grid):
        """Writes outside the grid change nothing."""
        assert numbered.set(Position(5, 5), 99) == numbered
        assert numbered.set(Position(-1, 0), 99).cells == numbered.cells

    def test_in_bounds(self, numbered: Grid):
        assert numbered.in_bounds(Position(2, 1))
        assert not numbered.in_bounds(Position(3, 1))


class TestTransforms:
    """Tests for map, indexed_map, fold, rows."""

    def test_map_keeps_shape(self, numbered: Grid):
        """map() applies to every cell."""
        doubled = numbered.map(lambda v: v * 2)
        assert doubled.cells == (0, 2, 4, 6, 8, 10)
        assert (doubled.width, doubled.height) == (3, 2)

    def test_indexed_map_passes_positions(self, numbered: Grid):
        """indexed_map() sees each cell's position."""
        labelled = numbered.indexed_map(lambda pos, v: (pos.x, pos.y, v))
        assert labelled.get(Position(2, 1)) == (2, 1, 5)
        assert labelled.get(Position(0, 1)) == (0, 1, 3)

    def test_fold_row_major(self, numbered: Grid):
        """fold() visits cells in row-major order."""
        visited = numbered.fold(lambda acc, v: acc + [v], [])
        assert visited == [0, 1, 2, 3, 4, 5]
        assert numbered.fold(lambda acc, v: acc + v, 0) == 15

    def test_rows(self, numbered: Grid):
        """rows() splits the grid top to bottom."""
        assert numbered.rows() == ((0, 1, 2), (3, 4, 5))

    def test_positions(self, numbered: Grid):
        """positions() walks row-major."""
        assert list(numbered.positions()) == [
            (0, 0), (1, 0), (2, 0),
            (0, 1), (1, 1), (2, 1),
        ]
