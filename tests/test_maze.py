"""Tests for the Maze aggregate: solving, stored solution state, legs."""

import math

import pytest

from rover_pathfinder.errors import InvalidInputError, OutOfRangeError
from rover_pathfinder.maze import make_maze

from conftest import hilly_elevation, overrides_with


class TestFlatEndToEnd:
    def test_diagonal_four_by_four(self, flat_maze) -> None:
        """Straight diagonal (0,0) -> (3,3) costs 3*sqrt(2)."""
        maze = flat_maze(4)
        assert maze.solve((0, 0), (3, 3))
        assert maze.solved()
        assert maze.solution_length == pytest.approx(3 * math.sqrt(2.0))
        assert maze.solution_length == pytest.approx(4.2426, abs=1e-4)
        assert maze.solution_path == ((0, 0), (1, 1), (2, 2), (3, 3))

    def test_orthogonal_four_by_four(self, flat_maze) -> None:
        """Without diagonals the minimum is six unit steps."""
        maze = flat_maze(4, diagonal=False)
        assert maze.solve((0, 0), (3, 3))
        assert maze.solution_length == 6.0
        path = maze.solution_path
        assert len(path) == 7
        assert path[0] == (0, 0) and path[-1] == (3, 3)
        for (x0, y0), (x1, y1) in zip(path, path[1:]):
            assert abs(x1 - x0) + abs(y1 - y0) == 1

    def test_membership_matches_path(self, flat_maze) -> None:
        maze = flat_maze(4)
        maze.solve((0, 0), (3, 3))
        for x in range(4):
            for y in range(4):
                assert maze.solution_contains((x, y)) == ((x, y) in maze.solution_path)

    def test_source_equals_goal(self, flat_maze) -> None:
        maze = flat_maze(3)
        assert maze.solve((1, 1), (1, 1))
        assert maze.solution_length == 0.0
        assert maze.solution_path == ((1, 1),)


class TestUnsolved:
    def test_starts_empty(self, flat_maze) -> None:
        maze = flat_maze(3)
        assert not maze.solved()
        assert maze.solution_length is None
        assert maze.solution_path == ()
        assert not maze.solution_contains((0, 0))

    def test_source_walled_in(self) -> None:
        side = 4
        over = overrides_with(side, [(1, 0), (0, 1), (1, 1)])
        maze = make_maze(side, over, [100] * 16)
        assert not maze.solve((0, 0), (3, 3))
        assert not maze.solved()
        assert maze.solution_length is None

    @pytest.mark.parametrize("source, goal", [((1, 1), (3, 3)), ((3, 3), (1, 1))])
    def test_blocked_endpoint_is_not_an_error(self, source, goal) -> None:
        maze = make_maze(4, overrides_with(4, [(1, 1)]), [100] * 16)
        assert not maze.solve(source, goal)

    def test_zero_elevation_endpoint(self) -> None:
        elev = [100] * 16
        elev[3 + 3 * 4] = 0
        maze = make_maze(4, [0] * 16, elev)
        assert maze.has_barrier((3, 3))
        assert not maze.solve((0, 0), (3, 3))

    def test_failed_solve_replaces_previous_solution(self) -> None:
        maze = make_maze(4, overrides_with(4, [(2, 2)]), [100] * 16)
        assert maze.solve((0, 0), (3, 3))
        assert maze.solution_length is not None
        assert not maze.solve((0, 0), (2, 2))
        assert not maze.solved()
        assert not maze.solution_contains((0, 0))


class TestValidation:
    @pytest.mark.parametrize("source, goal", [((-1, 0), (1, 1)), ((0, 0), (4, 0)), ((0, 0), (0, 9))])
    def test_out_of_range(self, flat_maze, source, goal) -> None:
        maze = flat_maze(4)
        with pytest.raises(OutOfRangeError):
            maze.solve(source, goal)
        assert not maze.solved()

    def test_length_per_dimension(self, flat_maze) -> None:
        maze = flat_maze(5)
        assert maze.length(0) == maze.length(1) == 5
        with pytest.raises(IndexError):
            maze.length(2)

    def test_legs_need_two_waypoints(self, flat_maze) -> None:
        with pytest.raises(InvalidInputError):
            flat_maze(3).solve_legs([(0, 0)])


class TestProperties:
    def test_path_avoids_barriers(self, hilly_maze) -> None:
        assert hilly_maze.solve((0, 3), (7, 3))
        assert not set(hilly_maze.solution_path) & hilly_maze.barriers
        for b in hilly_maze.barriers:
            assert not hilly_maze.solution_contains(b)

    def test_neighbors_exclude_barriers(self, hilly_maze) -> None:
        for x in range(hilly_maze.side):
            for y in range(hilly_maze.side):
                assert not set(hilly_maze.neighbors((x, y))) & hilly_maze.barriers

    def test_deterministic(self) -> None:
        side = 8
        wall = [(3, y) for y in range(1, 6)]
        results = []
        for _ in range(3):
            maze = make_maze(side, overrides_with(side, wall), hilly_elevation(side))
            maze.solve((0, 0), (7, 6))
            results.append((maze.solved(), maze.solution_length, maze.solution_path))
        assert results[0] == results[1] == results[2]

    def test_path_has_no_repeated_cells(self, hilly_maze) -> None:
        hilly_maze.solve((0, 7), (7, 0))
        path = hilly_maze.solution_path
        assert len(path) == len(set(path))
        open_cells = hilly_maze.side ** 2 - hilly_maze.barrier_count
        assert len(path) <= open_cells

    def test_find_path_leaves_stored_solution(self, hilly_maze) -> None:
        hilly_maze.solve((0, 0), (7, 7))
        stored = hilly_maze.solution
        other = hilly_maze.find_path((7, 0), (0, 7))
        assert other.solved
        assert hilly_maze.solution is stored


class TestLegs:
    def test_legs_are_independent(self, flat_maze) -> None:
        maze = flat_maze(4)
        legs = maze.solve_legs([(0, 0), (3, 0), (3, 3)])
        assert [leg.solved for leg in legs] == [True, True]
        assert legs[0].cost == 3.0
        assert legs[1].path[0] == (3, 0)
        assert legs[1].path[-1] == (3, 3)
        assert not maze.solved()

    def test_unsolved_leg(self) -> None:
        maze = make_maze(4, overrides_with(4, [(0, 2), (1, 2), (2, 2), (3, 2)]), [100] * 16)
        legs = maze.solve_legs([(0, 0), (3, 0), (3, 3)])
        assert legs[0].solved
        assert not legs[1].solved
        assert legs[1].cost is None
