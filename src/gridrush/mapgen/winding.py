# src/gridrush/mapgen/winding.py
# A protected route lengthened by out-and-back detours, with dense walls everywhere else.

from __future__ import annotations

import random
from typing import List, Optional

from ..grid import XY, Grid
from ..pathfind import NEIGHBOR_STEPS
from ..rng import chance
from .base import MazeGenerator, buffer_zone, direct_path, neighbors4, wall_unless

DETOURS_MIN, DETOURS_MAX = 1, 3
DETOUR_LEN_MIN, DETOUR_LEN_MAX = 2, 4
BASE_DENSITY = 0.5
DENSITY_PER_LEVEL = 0.03
FLANK_WALL_CHANCE = 0.65


def fill_density(level: int) -> float:
    return BASE_DENSITY + level * DENSITY_PER_LEVEL


def splice_detour(grid: Grid, path: List[XY], rng: random.Random) -> Optional[List[XY]]:
    """
    Insert one detour after a random interior cell: walk 2..4 steps in a
    direction that stays on the grid, then retrace back onto the route.
    Returns the new path, or None if no detour fits.
    """
    if len(path) < 3:
        return None
    i = rng.randint(1, len(path) - 2)
    px, py = path[i]
    k = rng.randint(DETOUR_LEN_MIN, DETOUR_LEN_MAX)
    dirs = [
        (dx, dy) for dx, dy in NEIGHBOR_STEPS
        if grid.in_bounds(px + dx * k, py + dy * k)
    ]
    if not dirs:
        return None
    dx, dy = rng.choice(dirs)
    out = [(px + dx * j, py + dy * j) for j in range(1, k + 1)]
    back = out[-2::-1] + [(px, py)]
    return path[:i + 1] + out + back + path[i + 1:]


def winding_path(grid: Grid, start: XY, goal: XY, rng: random.Random) -> List[XY]:
    path = direct_path(grid, start, goal)
    for _ in range(rng.randint(DETOURS_MIN, DETOURS_MAX)):
        spliced = splice_detour(grid, path, rng)
        if spliced is not None:
            path = spliced
    return path


class WindingMaze(MazeGenerator):
    name = "winding"

    def wall_density(self, level: int) -> float:
        return min(1.0, fill_density(level))

    def generate(self, level: int, grid: Grid, start: XY, goal: XY, rng: random.Random) -> None:
        path = winding_path(grid, start, goal, rng)
        protected = set(path)
        keep = protected | buffer_zone(grid, (start, goal))
        density = fill_density(level)

        for x, y in grid.cells():
            if (x, y) not in keep and chance(rng, density):
                wall_unless(grid, x, y, keep)

        for px, py in path[1:-1]:
            for nx, ny in neighbors4(grid, px, py):
                if (nx, ny) not in keep and chance(rng, FLANK_WALL_CHANCE):
                    wall_unless(grid, nx, ny, keep)
