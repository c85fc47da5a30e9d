from rover_pathfinder.errors import InvalidInputError, OutOfRangeError, PathfinderError
from rover_pathfinder.maze import Maze, make_maze
from rover_pathfinder.models import SolveResult, TerrainData

__all__ = [
    "InvalidInputError",
    "Maze",
    "OutOfRangeError",
    "PathfinderError",
    "SolveResult",
    "TerrainData",
    "make_maze",
]
