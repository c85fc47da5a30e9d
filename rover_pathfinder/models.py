# models.py
from dataclasses import dataclass, field
from typing import Optional, Tuple
import numpy as np

Cell = Tuple[int, int]  # (x, y)

@dataclass(frozen=True)
class TerrainData:
    side: int
    elevation: np.ndarray   # (side*side,) uint8, 0 = no data
    overrides: np.ndarray   # (side*side,) uint8 bitmask

    def elevation_at(self, cell: Cell) -> int:
        x, y = cell
        return int(self.elevation[x + y * self.side])

    def override_at(self, cell: Cell) -> int:
        x, y = cell
        return int(self.overrides[x + y * self.side])

@dataclass(frozen=True)
class SolveResult:
    solved: bool
    path: Tuple[Cell, ...] = ()
    cost: Optional[float] = None
    expansions: int = 0
    members: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "members", frozenset(self.path))

    def contains(self, cell: Cell) -> bool:
        return cell in self.members
