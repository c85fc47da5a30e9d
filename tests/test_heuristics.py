"""Tests for the remaining-time estimates."""

import math

import pytest

from rover_pathfinder.heuristics import make_heuristic, manhattan, octile

SIDE = 6
CELLS = [(x, y) for y in range(SIDE) for x in range(SIDE)]


@pytest.mark.parametrize("diagonal", [True, False])
def test_zero_at_goal_and_non_negative(diagonal) -> None:
    goal = (4, 1)
    h = make_heuristic(goal, diagonal)
    assert h(goal) == 0
    assert all(h(v) >= 0 for v in CELLS)


def test_orthogonal_is_manhattan() -> None:
    h = make_heuristic((5, 5), diagonal=False)
    assert h((0, 0)) == 10.0
    assert h((5, 2)) == 3.0
    assert manhattan((2, 3), (5, 5)) == 5.0


def test_diagonal_uses_octile() -> None:
    goal = (3, 3)
    h = make_heuristic(goal, diagonal=True)
    for v in CELLS:
        assert h(v) == octile(v, goal)
    assert h((0, 0)) == pytest.approx(3 * math.sqrt(2.0))
    assert h((0, 3)) == 3.0
    assert h((0, 1)) == pytest.approx(1 + 2 * math.sqrt(2.0))


def test_octile_never_exceeds_manhattan() -> None:
    goal = (2, 4)
    for v in CELLS:
        assert octile(v, goal) <= manhattan(v, goal) + 1e-12


def test_diagonal_estimate_is_consistent_on_flat_steps() -> None:
    """h(u) <= step length + h(v) for every 8-neighbour pair."""
    goal = (5, 0)
    h = make_heuristic(goal, diagonal=True)
    for (x, y) in CELLS:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                v = (x + dx, y + dy)
                if (dx, dy) == (0, 0) or v not in CELLS:
                    continue
                step = math.sqrt(2.0) if dx and dy else 1.0
                assert h((x, y)) <= step + h(v) + 1e-9
