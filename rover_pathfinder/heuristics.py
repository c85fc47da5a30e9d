# region Imports
import math
from typing import Callable
from rover_pathfinder.models import Cell
# endregion

SQRT2 = math.sqrt(2.0)

# region Distance Estimates
def manhattan(v: Cell, goal: Cell) -> float:
    return float(abs(goal[0] - v[0]) + abs(goal[1] - v[1]))


def octile(v: Cell, goal: Cell) -> float:
    dx = abs(goal[0] - v[0])
    dy = abs(goal[1] - v[1])
    lo, hi = min(dx, dy), max(dx, dy)
    return (hi - lo) + SQRT2 * lo
# endregion

# region Factory
def make_heuristic(goal: Cell, diagonal: bool = True) -> Callable[[Cell], float]:
    """Lower bound on the remaining time from a cell to ``goal``.

    Every step costs at least its flat length, so the Manhattan distance is a
    lower bound with orthogonal moves. With diagonal moves one step can close
    both axes for sqrt(2), so the octile distance is used instead.
    """
    if not diagonal:
        return lambda v: manhattan(v, goal)
    return lambda v: octile(v, goal)
# endregion
