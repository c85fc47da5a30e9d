# region Imports
import numbers
from typing import AbstractSet, Callable, Iterator
from rover_pathfinder.errors import InvalidInputError, OutOfRangeError
from rover_pathfinder.models import Cell
# endregion

ORTHOGONAL_STEPS = ((0, -1), (-1, 0), (1, 0), (0, 1))
DIAGONAL_STEPS = ((-1, -1), (1, -1), (-1, 1), (1, 1))

# region Index Helpers
def xy_to_idx(cell: Cell, side: int) -> int:
    x, y = cell
    return x + y * side


def idx_to_xy(i: int, side: int) -> Cell:
    x = i % side
    return (x, (i - x) // side)


def in_bounds(cell: Cell, side: int) -> bool:
    x, y = cell
    return 0 <= x < side and 0 <= y < side


def check_cell(cell, side: int, name: str = "cell") -> Cell:
    """Return ``cell`` as an ``(x, y)`` int tuple or raise if it is off the grid."""
    try:
        x, y = cell
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be an (x, y) pair, got {cell!r}") from None
    if not all(isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in (x, y)):
        raise InvalidInputError(f"{name} coordinates must be integers, got {cell!r}")
    c = (int(x), int(y))
    if not in_bounds(c, side):
        raise OutOfRangeError(f"{name} {c} outside grid [0, {side})^2")
    return c
# endregion

# region Neighbor Generation
def neighbors_4(u: Cell, side: int) -> Iterator[Cell]:
    x, y = u
    for dx, dy in ORTHOGONAL_STEPS:
        xx, yy = x + dx, y + dy
        if 0 <= xx < side and 0 <= yy < side:
            yield (xx, yy)


def neighbors_8(u: Cell, side: int) -> Iterator[Cell]:
    x, y = u
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            xx, yy = x + dx, y + dy
            if 0 <= xx < side and 0 <= yy < side:
                yield (xx, yy)
# endregion

# region Filtered View
def filtered_neighbors_factory(
    side: int,
    barriers: AbstractSet[Cell],
    diagonal: bool = True,
) -> Callable[[Cell], Iterator[Cell]]:
    """Adjacency over the grid with every barrier cell removed.

    A barrier cell has no edges at all, so it never yields neighbours and is
    never yielded as one.
    """
    base = neighbors_8 if diagonal else neighbors_4

    def neighbors(u: Cell) -> Iterator[Cell]:
        if u in barriers:
            return
        for v in base(u, side):
            if v not in barriers:
                yield v

    return neighbors
# endregion
