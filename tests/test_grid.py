"""Tests for the Grid module."""

import numpy as np
import pytest

from block_snake.grid import CellType, Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.rows == 6
        assert grid.cols == 6
        assert grid.size == 36

    def test_custom_dimensions(self):
        grid = Grid(rows=8, cols=10)
        assert grid.rows == 8
        assert grid.cols == 10
        assert grid.size == 80

    def test_single_cell_allowed(self):
        assert Grid(rows=1, cols=1).size == 1

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            Grid(rows=0, cols=4)
        with pytest.raises(ValueError, match="at least 1"):
            Grid(rows=4, cols=0)

    def test_equality_by_dimensions(self):
        assert Grid(rows=3, cols=4) == Grid(rows=3, cols=4)
        assert Grid(rows=3, cols=4) != Grid(rows=4, cols=3)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(rows=6, cols=6)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((5, 5))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, -1))
        assert not grid.in_bounds((6, 0))
        assert not grid.in_bounds((0, 6))

    def test_in_bounds_non_square(self):
        grid = Grid(rows=2, cols=5)
        assert grid.in_bounds((1, 4))
        assert not grid.in_bounds((2, 4))
        assert not grid.in_bounds((1, 5))

    def test_center(self):
        assert Grid(rows=6, cols=6).center() == (3, 3)
        assert Grid(rows=5, cols=9).center() == (2, 4)


class TestGridBoard:
    def test_board_marks_cells(self):
        grid = Grid(rows=4, cols=4)
        cells = grid.board([(1, 1), (1, 2)], food=(3, 0))
        assert cells.shape == (4, 4)
        assert cells[1, 1] == CellType.FILL
        assert cells[1, 2] == CellType.FILL
        assert cells[3, 0] == CellType.FOOD
        assert np.count_nonzero(cells) == 3

    def test_board_without_food(self):
        grid = Grid(rows=2, cols=2)
        cells = grid.board([(0, 0)])
        assert np.count_nonzero(cells == CellType.FOOD) == 0

    def test_to_dict(self):
        assert Grid(rows=3, cols=7).to_dict() == {"rows": 3, "cols": 7}
