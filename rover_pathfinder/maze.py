"""Searchable terrain maze.

The maze is a square grid of cells, each either open or a barrier. You can
step to any of the eight surrounding cells (or, with ``diagonal=False``, the
four orthogonal ones); stepping onto a barrier is not allowed. Step time
comes from :func:`rover_pathfinder.costs.time_weight`.
"""
# region Imports
import logging
from typing import FrozenSet, List, Optional, Sequence, Tuple

from rover_pathfinder.astar_core import astar, reconstruct
from rover_pathfinder.costs import edge_cost_factory
from rover_pathfinder.errors import InvalidInputError
from rover_pathfinder.grid import check_cell, filtered_neighbors_factory
from rover_pathfinder.heuristics import make_heuristic
from rover_pathfinder.models import Cell, SolveResult, TerrainData
from rover_pathfinder.terrain import build_barriers, load_terrain
# endregion

logger = logging.getLogger(__name__)

NOT_SOLVED = SolveResult(solved=False)

class Maze:
    def __init__(
        self,
        terrain: TerrainData,
        barriers: FrozenSet[Cell],
        diagonal: bool = True,
    ):
        self.terrain = terrain
        self.barriers = frozenset(barriers)
        self.diagonal = bool(diagonal)
        self._neighbors = filtered_neighbors_factory(terrain.side, self.barriers, self.diagonal)
        self._edge_cost = edge_cost_factory(terrain, self.barriers)
        self._solution = NOT_SOLVED

    # region Grid Queries
    @property
    def side(self) -> int:
        return self.terrain.side

    @property
    def barrier_count(self) -> int:
        return len(self.barriers)

    def length(self, d: int) -> int:
        if d not in (0, 1):
            raise IndexError(f"dimension {d} out of range for a 2-D grid")
        return self.terrain.side

    def has_barrier(self, u: Cell) -> bool:
        return u in self.barriers

    def neighbors(self, u: Cell) -> List[Cell]:
        return list(self._neighbors(u))
    # endregion

    # region Solving
    def find_path(self, source, goal) -> SolveResult:
        """Search for the fastest path without touching the stored solution."""
        source = check_cell(source, self.side, "source")
        goal = check_cell(goal, self.side, "goal")

        if self.has_barrier(source) or self.has_barrier(goal):
            logger.info(f"No path {source} -> {goal}: endpoint is a barrier")
            return NOT_SOLVED

        logger.debug(f"A* {source} -> {goal} on {self.side}x{self.side} grid, diagonal={self.diagonal}")
        state = astar(
            start=source,
            goal=goal,
            neighbors_fn=self._neighbors,
            edge_cost_fn=self._edge_cost,
            heuristic_fn=make_heuristic(goal, self.diagonal),
        )
        if not state.found:
            logger.info(f"No path {source} -> {goal} after {state.expansions} expansions")
            return SolveResult(solved=False, expansions=state.expansions)

        path = reconstruct(state.parent, source, goal)
        logger.info(
            f"Solved {source} -> {goal}: {len(path)} cells, time={state.cost:.4f}, "
            f"expansions={state.expansions}"
        )
        return SolveResult(solved=True, path=path, cost=state.cost, expansions=state.expansions)

    def solve(self, source, goal) -> bool:
        """Solve and store the result; returns True if a path was found."""
        result = self.find_path(source, goal)
        self._solution = result
        return result.solved

    def solve_legs(self, waypoints: Sequence[Cell]) -> List[SolveResult]:
        if len(waypoints) < 2:
            raise InvalidInputError("waypoints must have at least 2 cells")
        return [self.find_path(a, b) for a, b in zip(waypoints, waypoints[1:])]
    # endregion

    # region Solution State
    def solved(self) -> bool:
        return self._solution.solved

    def solution_contains(self, u: Cell) -> bool:
        return self._solution.contains(u)

    @property
    def solution(self) -> SolveResult:
        return self._solution

    @property
    def solution_path(self) -> Tuple[Cell, ...]:
        return self._solution.path

    @property
    def solution_length(self) -> Optional[float]:
        return self._solution.cost
    # endregion


def make_maze(side: int, overrides, elevation, diagonal: bool = True) -> Maze:
    """Build a Maze from raw override and elevation bytes (row-major)."""
    terrain = load_terrain(side, elevation, overrides)
    barriers, _ = build_barriers(terrain)
    return Maze(terrain, barriers, diagonal=diagonal)
