# region Exception Taxonomy
class PathfinderError(Exception):
    """Base class for errors raised by rover_pathfinder."""


class InvalidInputError(PathfinderError, ValueError):
    """Terrain arrays or cells that cannot describe a valid grid."""


class OutOfRangeError(PathfinderError, IndexError):
    """A source or goal cell lies outside the grid."""
# endregion
