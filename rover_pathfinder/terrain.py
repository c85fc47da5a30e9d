# terrain.py
import logging
from typing import FrozenSet, Tuple

import numpy as np

from rover_pathfinder.config import BARRIER_MASK, NO_DATA_ELEVATION
from rover_pathfinder.errors import InvalidInputError
from rover_pathfinder.models import Cell, TerrainData

logger = logging.getLogger(__name__)

# region Byte Array Coercion
def _as_byte_array(values, side: int, name: str) -> np.ndarray:
    """Flatten ``values`` to a read-only (side*side,) uint8 array."""
    if isinstance(values, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(bytes(values), dtype=np.uint8)
    else:
        try:
            arr = np.asarray(values)
        except (ValueError, TypeError):
            raise InvalidInputError(f"{name} is not a flat or (side, side) grid of bytes") from None
        if arr.ndim == 2:
            if arr.shape != (side, side):
                raise InvalidInputError(f"{name} shape {arr.shape} does not match side {side}")
            arr = arr.ravel()
        elif arr.ndim != 1:
            raise InvalidInputError(f"{name} must be 1-D or (side, side), got ndim={arr.ndim}")
        if arr.size and arr.dtype != np.uint8:
            if arr.dtype.kind not in "iub":
                raise InvalidInputError(f"{name} must hold integers, got dtype {arr.dtype}")
            if int(arr.min()) < 0 or int(arr.max()) > 255:
                raise InvalidInputError(f"{name} values must be bytes in [0, 255]")
        arr = arr.astype(np.uint8)

    if arr.size != side * side:
        raise InvalidInputError(
            f"{name} has {arr.size} values, expected side*side = {side * side}"
        )
    arr = arr.copy()
    arr.flags.writeable = False
    return arr
# endregion

# region Terrain Construction
def load_terrain(side: int, elevation, overrides) -> TerrainData:
    """Validate raw elevation/override bytes and wrap them as TerrainData.

    Both inputs are row-major, indexed ``x + y*side``. Accepts ``bytes``,
    integer sequences, or numpy arrays (flat or ``(side, side)``).
    """
    if isinstance(side, bool) or not isinstance(side, (int, np.integer)) or side < 1:
        raise InvalidInputError(f"side must be a positive integer, got {side!r}")
    side = int(side)
    elev = _as_byte_array(elevation, side, "elevation")
    over = _as_byte_array(overrides, side, "overrides")
    return TerrainData(side=side, elevation=elev, overrides=over)
# endregion

# region Barrier Set
def barrier_mask(terrain: TerrainData) -> np.ndarray:
    """Boolean (side*side,) mask, True where the cell is impassable."""
    return ((terrain.overrides & BARRIER_MASK) != 0) | (terrain.elevation == NO_DATA_ELEVATION)


def build_barriers(terrain: TerrainData) -> Tuple[FrozenSet[Cell], int]:
    side = terrain.side
    barriers = set()
    for i in np.flatnonzero(barrier_mask(terrain)):
        i = int(i)
        x = i % side
        y = (i - x) // side
        barriers.add((x, y))
    count = len(barriers)
    logger.info(f"Number of non-traversable cells: {count}")
    return frozenset(barriers), count
# endregion
