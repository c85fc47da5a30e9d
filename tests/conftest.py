"""Shared fixtures for rover_pathfinder tests.

Terrain is built from plain Python lists so every expected cost can be
worked out by hand: flat grids use one constant elevation, hilly grids use
a deterministic formula that never produces the no-data value 0.
"""

import pytest

from rover_pathfinder.config import OF_WATER_BASIN
from rover_pathfinder.maze import make_maze


def hilly_elevation(side: int):
    """Deterministic bumpy terrain in [50, 89], row-major."""
    return [50 + ((x * 7 + y * 13) % 40) for y in range(side) for x in range(side)]


def overrides_with(side: int, cells, bits: int = OF_WATER_BASIN):
    """Override layer with ``bits`` set on each (x, y) in ``cells``."""
    layer = [0] * (side * side)
    for x, y in cells:
        layer[x + y * side] = bits
    return layer


@pytest.fixture
def flat_maze():
    """Factory for a flat, fully open maze."""

    def _make(side: int = 4, elevation: int = 100, diagonal: bool = True):
        return make_maze(side, [0] * (side * side), [elevation] * (side * side), diagonal=diagonal)

    return _make


@pytest.fixture
def hilly_maze():
    """8x8 bumpy maze with a short water wall at x=3, y=1..5."""
    side = 8
    wall = [(3, y) for y in range(1, 6)]
    return make_maze(side, overrides_with(side, wall), hilly_elevation(side))
