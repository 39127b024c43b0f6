"""Tests for Grid bounds."""

import pytest

from toyrobot.domain.grid import Grid


class TestGrid:
    @pytest.mark.parametrize("x", range(5))
    @pytest.mark.parametrize("y", range(5))
    def test_every_cell_is_valid(self, grid: Grid, x: int, y: int) -> None:
        assert grid.is_valid(x, y)

    @pytest.mark.parametrize(
        ("x", "y"),
        [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5), (-1, -1), (100, 2)],
    )
    def test_outside_cells_are_invalid(self, grid: Grid, x: int, y: int) -> None:
        assert not grid.is_valid(x, y)

    def test_rectangular_grid(self) -> None:
        grid = Grid(width=3, height=7)
        assert grid.is_valid(2, 6)
        assert not grid.is_valid(3, 6)
        assert not grid.is_valid(2, 7)

    def test_single_cell_grid(self) -> None:
        grid = Grid(1, 1)
        assert grid.is_valid(0, 0)
        assert not grid.is_valid(1, 0)

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            Grid(width, height)

    def test_immutable(self, grid: Grid) -> None:
        with pytest.raises(AttributeError):
            grid.width = 10  # type: ignore[misc]
