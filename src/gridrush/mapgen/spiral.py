# src/gridrush/mapgen/spiral.py
# Concentric square rings around the centre, each side guaranteed an opening.
#
# Rings sit at odd radii so the even radii between them stay open as corridors;
# with one opening per side every ring can be crossed from any corridor.

from __future__ import annotations

import random
from typing import List

from ..grid import XY, Grid
from ..rng import chance
from ..tiles import OPEN, WALL
from .base import MazeGenerator

RING_WALL_CHANCE = 0.7
RING_SPACING = 2


def ring_cells(grid: Grid, cx: int, cy: int, r: int) -> List[XY]:
    """In-bounds cells at Chebyshev distance exactly ``r`` from the centre."""
    out: List[XY] = []
    for y in range(cy - r, cy + r + 1):
        for x in range(cx - r, cx + r + 1):
            if max(abs(x - cx), abs(y - cy)) == r and grid.in_bounds(x, y):
                out.append((x, y))
    return out


def ring_sides(grid: Grid, cx: int, cy: int, r: int) -> List[List[XY]]:
    """
    The in-bounds cells of each side of ring ``r``, corners excluded.
    A side whose row/column lies off the grid is omitted.
    """
    sides: List[List[XY]] = []
    inner = range(-r + 1, r)
    for y in (cy - r, cy + r):
        side = [(cx + d, y) for d in inner if grid.in_bounds(cx + d, y)]
        if side:
            sides.append(side)
    for x in (cx - r, cx + r):
        side = [(x, cy + d) for d in inner if grid.in_bounds(x, cy + d)]
        if side:
            sides.append(side)
    return sides


class SpiralMaze(MazeGenerator):
    name = "spiral"

    def wall_density(self, level: int) -> float:
        return RING_WALL_CHANCE

    def generate(self, level: int, grid: Grid, start: XY, goal: XY, rng: random.Random) -> None:
        n = grid.size
        cx = cy = n // 2
        keep = {start, goal}

        for r in range(1, n, RING_SPACING):
            cells = ring_cells(grid, cx, cy, r)
            if not cells:
                break
            for x, y in cells:
                if (x, y) not in keep and chance(rng, RING_WALL_CHANCE):
                    grid.set(x, y, WALL)
            for side in ring_sides(grid, cx, cy, r):
                ox, oy = rng.choice(side)
                grid.set(ox, oy, OPEN)
