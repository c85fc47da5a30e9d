# region Imports
import logging
import math
from typing import AbstractSet, Callable, Optional
from rover_pathfinder.config import CW_CONSTANT, K_CLIMB, K_SLOPE, NO_DATA_ELEVATION
from rover_pathfinder.models import Cell, TerrainData
# endregion

logger = logging.getLogger(__name__)

SQRT2 = math.sqrt(2.0)

# region Helpers
def is_diagonal(source: Cell, target: Cell) -> bool:
    return abs(source[0] - target[0]) == abs(source[1] - target[1])


def _step_base(diagonal: bool) -> float:
    return SQRT2 if diagonal else 1.0
# endregion

# region Step Time
def time_weight(source: Cell, target: Cell, terrain: TerrainData) -> float:
    """Time to move from ``source`` to the adjacent cell ``target``.

    Flat steps cost the plain step length (1 or sqrt(2)). Sloped steps cost
    the slope length plus a climb term proportional to the elevation change.
    A no-data elevation on either end returns ``inf`` so the edge is never
    taken.
    """
    diag = is_diagonal(source, target)
    source_elev = terrain.elevation_at(source)
    target_elev = terrain.elevation_at(target)

    if source_elev == NO_DATA_ELEVATION or target_elev == NO_DATA_ELEVATION:
        logger.error(
            f"Inconsistent terrain: step {source} -> {target} touches no-data elevation "
            f"({source_elev} -> {target_elev}); edge excluded"
        )
        return math.inf

    delta = target_elev - source_elev
    base = _step_base(diag)
    if delta == 0:
        return base

    slope_len = math.sqrt(base * base + K_SLOPE * delta * delta)
    if delta > 0:
        return slope_len + CW_CONSTANT * K_CLIMB * delta
    return slope_len - CW_CONSTANT * K_CLIMB * delta
# endregion

# region Edge Cost Factory
def edge_cost_factory(
    terrain: TerrainData,
    barriers: AbstractSet[Cell],
) -> Callable[[Cell, Cell], Optional[float]]:
    def edge_cost(u: Cell, v: Cell) -> Optional[float]:
        if u in barriers or v in barriers:
            return None
        c = time_weight(u, v, terrain)
        if not math.isfinite(c):
            return None
        return c

    return edge_cost
# endregion
