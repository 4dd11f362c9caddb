import pytest

from sweeper.sweeper_algorithm.constants import (UNVISITED, OBSTACLE, VISITED, ENTERED_FROM_LEFT,
                                                 ENTERED_FROM_ABOVE, ENTERED_FROM_BELOW)
from sweeper.sweeper_algorithm.errors import InvalidDimension, OutOfBounds
from sweeper.sweeper_algorithm.grid import GridState


class TestReset:
    def test_new_grid_is_unconfigured(self) -> None:
        grid = GridState()
        assert grid.shape == (0, 0)
        assert not grid.is_configured

    def test_reset_marks_every_cell_unvisited(self) -> None:
        grid = GridState(2, 3)
        grid.set_status(1, 1, OBSTACLE)
        grid.reset(3, 4)
        assert grid.shape == (3, 4)
        assert grid.count(UNVISITED) == 12

    @pytest.mark.parametrize("rows, cols", [(0, 5), (5, 0), (-1, 3), (51, 10), (10, 51)])
    def test_invalid_dimensions_leave_prior_state(self, rows, cols) -> None:
        grid = GridState(2, 2)
        grid.set_status(2, 2, OBSTACLE)
        with pytest.raises(InvalidDimension):
            grid.reset(rows, cols)
        assert grid.shape == (2, 2)
        assert grid.status_at(2, 2) == OBSTACLE

    def test_max_size_is_configurable(self) -> None:
        grid = GridState(max_size=80)
        grid.reset(80, 80)
        assert grid.shape == (80, 80)


class TestCellAccess:
    def test_coordinates_are_one_indexed(self) -> None:
        grid = GridState(2, 3)
        grid.set_status(2, 3, VISITED)
        assert grid.status_at(2, 3) == VISITED
        assert grid.cells[1, 2] == VISITED

    @pytest.mark.parametrize("x, y", [(0, 1), (1, 0), (3, 1), (1, 4)])
    def test_out_of_bounds_access_raises(self, x, y) -> None:
        grid = GridState(2, 3)
        with pytest.raises(OutOfBounds):
            grid.status_at(x, y)
        with pytest.raises(OutOfBounds):
            grid.set_status(x, y, VISITED)

    def test_unknown_status_is_rejected(self) -> None:
        grid = GridState(2, 2)
        with pytest.raises(ValueError):
            grid.set_status(1, 1, 42)

    def test_is_unvisited_is_false_off_the_grid(self) -> None:
        grid = GridState(2, 2)
        assert grid.is_unvisited(1, 1)
        assert not grid.is_unvisited(0, 1)
        assert not grid.is_unvisited(3, 3)
        grid.set_status(1, 1, OBSTACLE)
        assert not grid.is_unvisited(1, 1)

    def test_snapshot_is_a_copy(self) -> None:
        grid = GridState(2, 2)
        snap = grid.snapshot()
        grid.set_status(1, 1, VISITED)
        assert snap[0, 0] == UNVISITED


class TestSettle:
    def test_direction_tags_become_visited(self) -> None:
        grid = GridState(2, 2)
        grid.set_status(1, 1, ENTERED_FROM_LEFT)
        grid.set_status(1, 2, ENTERED_FROM_ABOVE)
        grid.set_status(2, 1, OBSTACLE)
        grid.settle()
        assert grid.status_at(1, 1) == VISITED
        assert grid.status_at(1, 2) == VISITED
        assert grid.status_at(2, 1) == OBSTACLE
        assert grid.status_at(2, 2) == UNVISITED

    def test_settle_is_idempotent(self) -> None:
        grid = GridState(3, 3)
        grid.set_status(1, 1, ENTERED_FROM_BELOW)
        grid.set_status(3, 3, OBSTACLE)
        grid.settle()
        once = grid.snapshot()
        grid.settle()
        assert (grid.cells == once).all()
