# region Imports
from typing import AbstractSet, Iterator, Optional
from rover_pathfinder.config import SNAP_MAX_RADIUS
from rover_pathfinder.grid import in_bounds
from rover_pathfinder.models import Cell
# endregion

# region Ring Walk
def ring(center: Cell, rad: int) -> Iterator[Cell]:
    """Cells at Chebyshev distance exactly ``rad`` from ``center``, row by row."""
    x, y = center
    for yy in range(y - rad, y + rad + 1):
        if yy in (y - rad, y + rad):
            for xx in range(x - rad, x + rad + 1):
                yield (xx, yy)
        else:
            yield (x - rad, yy)
            yield (x + rad, yy)
# endregion

# region Nearest Open Cell Search
def nearest_unblocked(
    cell: Cell,
    barriers: AbstractSet[Cell],
    side: int,
    max_radius: int = SNAP_MAX_RADIUS,
) -> Cell:
    """Closest open cell to ``cell`` by Euclidean distance, within ``max_radius`` rings.

    Returns ``cell`` itself when it is open or nothing open is in reach.
    """
    if cell not in barriers:
        return cell

    best: Optional[Cell] = None
    best_d2 = 0
    for rad in range(1, max_radius + 1):
        # every cell on this ring is at least rad away
        if best is not None and rad * rad >= best_d2:
            break
        for c in ring(cell, rad):
            if not in_bounds(c, side) or c in barriers:
                continue
            d2 = (c[0] - cell[0]) ** 2 + (c[1] - cell[1]) ** 2
            if best is None or d2 < best_d2:
                best, best_d2 = c, d2

    return cell if best is None else best
# endregion
