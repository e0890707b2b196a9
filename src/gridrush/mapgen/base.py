# src/gridrush/mapgen/base.py
# Shared contract and helpers for the maze strategies.

from __future__ import annotations

import random
from typing import Iterable, List, Set

from ..grid import XY, Grid
from ..pathfind import NEIGHBOR_STEPS, find_path
from ..tiles import WALL
from .repair import l_corridor_cells


class MazeGenerator:
    """
    A strategy that lays walls onto ``grid`` for one level.

    Generators mutate the grid in place and may leave it unsolvable; the
    level controller validates and repairs afterwards. Start and goal are
    never walled by a well-behaved generator, but the controller reopens
    them regardless.
    """

    name = "base"

    def wall_density(self, level: int) -> float:
        return 0.0

    def generate(self, level: int, grid: Grid, start: XY, goal: XY, rng: random.Random) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def neighbors4(grid: Grid, x: int, y: int) -> List[XY]:
    out: List[XY] = []
    for dx, dy in NEIGHBOR_STEPS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny):
            out.append((nx, ny))
    return out


def direct_path(grid: Grid, start: XY, goal: XY) -> List[XY]:
    """Pathfinder route on the current grid; the L route if the grid is already blocked."""
    path = find_path(grid, start, goal)
    if path:
        return path
    return l_corridor_cells(start, goal)


def buffer_zone(grid: Grid, centers: Iterable[XY], radius: int = 1) -> Set[XY]:
    """All in-bounds cells within Chebyshev ``radius`` of any center."""
    out: Set[XY] = set()
    for cx, cy in centers:
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if grid.in_bounds(cx + dx, cy + dy):
                    out.add((cx + dx, cy + dy))
    return out


def wall_unless(grid: Grid, x: int, y: int, keep: Set[XY]) -> bool:
    if (x, y) in keep:
        return False
    grid.set(x, y, WALL)
    return True
