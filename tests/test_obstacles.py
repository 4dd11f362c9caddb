import pytest

from conftest import ScriptedRandom, make_world
from sweeper.sweeper_algorithm.constants import OBSTACLE, UNVISITED, VISITED
from sweeper.sweeper_algorithm.errors import OutOfRange
from sweeper.sweeper_algorithm.grid import GridState
from sweeper.sweeper_algorithm.motion import ObstacleMotionStep
from sweeper.sweeper_algorithm.obstacles import Obstacle, ObstacleRegistry


class TestAddStatic:
    def test_marks_cell_and_records_obstacle(self) -> None:
        grid, obstacles = make_world(3, 3)
        obstacle = obstacles.add_static(2, 3, mobile=False)
        assert grid.status_at(2, 3) == OBSTACLE
        assert obstacle.position == (2, 3)
        assert obstacles.static_count() == 1
        assert obstacles.static_positions() == [(2, 3)]

    @pytest.mark.parametrize("x, y", [(0, 1), (4, 1), (1, 4), (-2, -2)])
    def test_out_of_range_raises(self, x, y) -> None:
        grid, obstacles = make_world(3, 3)
        with pytest.raises(OutOfRange):
            obstacles.add_static(x, y)
        assert obstacles.static_count() == 0

    def test_coin_flip_decides_mobility_once(self) -> None:
        grid = GridState(3, 3)
        obstacles = ObstacleRegistry(grid, rng=ScriptedRandom(floats=[0.2, 0.7]))
        first = obstacles.add_static(1, 2)
        second = obstacles.add_static(2, 1)
        assert first.mobile
        assert not second.mobile
        assert obstacles.mobile_obstacles() == [first]
        assert obstacles.is_mobile_at(1, 2)
        assert not obstacles.is_mobile_at(2, 1)

    def test_forced_flag_skips_coin_flip(self) -> None:
        grid = GridState(3, 3)
        obstacles = ObstacleRegistry(grid, rng=ScriptedRandom())
        assert obstacles.add_static(1, 1, mobile=True).mobile
        assert not obstacles.add_static(1, 2, mobile=False).mobile

    def test_duplicate_is_not_counted_twice(self) -> None:
        grid, obstacles = make_world(3, 3, static=[(2, 2)])
        assert obstacles.add_static(2, 2, mobile=False) is None
        assert obstacles.static_count() == 1

    def test_origin_of_moved_obstacle_is_reserved(self) -> None:
        grid, obstacles = make_world(1, 4, mobile=[(1, 4)])
        ObstacleMotionStep(grid, obstacles, rng=ScriptedRandom(choices=[2])).step()
        assert grid.status_at(1, 4) == UNVISITED
        assert obstacles.add_static(1, 4, mobile=False) is None
        assert obstacles.static_count() == 1

    def test_can_be_placed_on_visited_cell(self) -> None:
        grid, obstacles = make_world(3, 3)
        grid.set_status(1, 2, VISITED)
        obstacles.add_static(1, 2, mobile=False)
        assert grid.status_at(1, 2) == OBSTACLE


class TestAddMany:
    def test_drops_offending_coordinates_and_keeps_going(self) -> None:
        grid, obstacles = make_world(3, 3)
        added, rejected = obstacles.add_many([(1, 2), (9, 9), (3, 3), (0, 1)], mobile=False)
        assert [o.position for o in added] == [(1, 2), (3, 3)]
        assert rejected == [(9, 9), (0, 1)]
        assert grid.count(OBSTACLE) == 2


class TestResizeAndReplace:
    def test_resize_keeps_obstacles_that_fit(self) -> None:
        grid, obstacles = make_world(5, 5, static=[(1, 2), (5, 5)])
        obstacles.resize(3, 3)
        assert obstacles.static_positions() == [(1, 2)]
        assert grid.status_at(1, 2) == OBSTACLE
        assert grid.count(OBSTACLE) == 1

    def test_resize_returns_mobile_obstacle_to_origin(self) -> None:
        grid, obstacles = make_world(3, 3, mobile=[(2, 2)])
        moved = obstacles.mobile_obstacles()[0]
        grid.set_status(2, 2, UNVISITED)
        moved.x, moved.y = 2, 3
        grid.set_status(2, 3, OBSTACLE)

        obstacles.resize(3, 3)
        assert moved.position == (2, 2)
        assert moved.mobile
        assert grid.status_at(2, 2) == OBSTACLE
        assert grid.status_at(2, 3) == UNVISITED

    def test_resize_after_motion_keeps_one_obstacle_per_cell(self) -> None:
        grid, obstacles = make_world(1, 4, mobile=[(1, 4)])
        ObstacleMotionStep(grid, obstacles, rng=ScriptedRandom(choices=[2])).step()
        obstacles.add_static(1, 4, mobile=False)
        obstacles.resize(1, 4)
        assert grid.count(OBSTACLE) == len(obstacles) == 1

        # the next tick must not erase a cell another obstacle still occupies
        ObstacleMotionStep(grid, obstacles, rng=ScriptedRandom(choices=[2])).step()
        for o in obstacles:
            assert grid.status_at(*o.position) == OBSTACLE
        assert grid.count(OBSTACLE) == len(obstacles)

    def test_resize_drops_second_obstacle_sharing_an_origin(self) -> None:
        grid, obstacles = make_world(2, 2, mobile=[(1, 1)])
        twin = Obstacle(1, 1)
        obstacles.obstacles.append(twin)
        obstacles.resize(2, 2)
        assert len(obstacles) == 1
        assert grid.count(OBSTACLE) == 1

    def test_replace_loads_static_only(self) -> None:
        grid, obstacles = make_world(3, 3, mobile=[(1, 1)])
        obstacles.replace(4, 2, [(1, 1), (4, 2), (5, 1)])
        assert grid.shape == (4, 2)
        assert obstacles.static_positions() == [(1, 1), (4, 2)]
        assert obstacles.mobile_obstacles() == []

    def test_clear_forgets_obstacles(self) -> None:
        grid, obstacles = make_world(3, 3, static=[(1, 1)])
        obstacles.clear()
        assert len(obstacles) == 0
