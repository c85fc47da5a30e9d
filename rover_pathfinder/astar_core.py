# region Imports and Typing
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import heapq, logging
from rover_pathfinder.models import Cell
# endregion

logger = logging.getLogger(__name__)

@dataclass
class SearchState:
    found: bool
    source: Cell
    goal: Cell
    g: Dict[Cell, float] = field(default_factory=dict)
    parent: Dict[Cell, Optional[Cell]] = field(default_factory=dict)
    expansions: int = 0

    @property
    def cost(self) -> Optional[float]:
        return self.g[self.goal] if self.found else None

# region Path Reconstruction
def reconstruct(parent: Dict[Cell, Optional[Cell]], source: Cell, goal: Cell) -> Tuple[Cell, ...]:
    """Walk predecessors from ``goal`` back to ``source``; return source -> goal.

    The walk can take at most ``len(parent)`` steps; a cycle or a chain that
    never reaches ``source`` is a bug in the search and raises RuntimeError.
    """
    path: List[Cell] = [goal]
    seen = {goal}
    v = goal
    while v != source:
        if len(path) > len(parent):
            raise RuntimeError(f"Predecessor chain from {goal} exceeds {len(parent)} cells")
        u = parent.get(v)
        if u is None:
            raise RuntimeError(f"Predecessor chain from {goal} stops at {v} before {source}")
        if u in seen:
            raise RuntimeError(f"Predecessor chain from {goal} revisits {u}")
        seen.add(u)
        path.append(u)
        v = u
    path.reverse()
    return tuple(path)
# endregion

# region A* Algorithm
def astar(
    start: Cell,
    goal: Cell,
    neighbors_fn: Callable[[Cell], Iterable[Cell]],
    edge_cost_fn: Callable[[Cell, Cell], Optional[float]],
    heuristic_fn: Callable[[Cell], float],
) -> SearchState:
    """Best-first search on f = g + h; stops as soon as ``goal`` is popped.

    Frontier entries are ``(f, h, counter, cell)``; the insertion counter
    makes equal-priority pops deterministic. Edges whose cost is ``None`` are
    skipped.
    """
    state = SearchState(found=False, source=start, goal=goal)
    g, parent = state.g, state.parent
    g[start] = 0.0
    parent[start] = None
    if start == goal:
        state.found = True
        return state

    counter = 0
    h0 = heuristic_fn(start)
    openh: List[Tuple[float, float, int, Cell]] = [(h0, h0, counter, start)]
    closed = set()

    while openh:
        f, h, _, u = heapq.heappop(openh)
        if u in closed:
            continue
        closed.add(u)
        state.expansions += 1

        if u == goal:
            state.found = True
            return state

        gu = g[u]
        # region Neighbor Loop
        for v in neighbors_fn(u):
            if v in closed:
                continue
            c = edge_cost_fn(u, v)
            if c is None:
                continue
            alt = gu + c
            old = g.get(v)
            if old is None or alt < old - 1e-12:
                g[v] = alt
                parent[v] = u
                hv = heuristic_fn(v)
                counter += 1
                heapq.heappush(openh, (alt + hv, hv, counter, v))
        # endregion

    logger.debug(f"Frontier exhausted after {state.expansions} expansions; {goal} unreachable")
    return state
# endregion
