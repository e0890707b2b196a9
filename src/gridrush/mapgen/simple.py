# src/gridrush/mapgen/simple.py
# Easy layouts for the first two levels: deterministic parity walls around a protected route.

from __future__ import annotations

import random
from typing import Callable, Dict

from ..grid import XY, Grid
from ..rng import chance
from .base import MazeGenerator, direct_path, neighbors4, wall_unless

ADJACENT_WALL_CHANCE = 0.5


def _pattern_a(x: int, y: int) -> bool:
    return (x + y) % 3 == 0


def _pattern_b(x: int, y: int) -> bool:
    return (x * y) % 4 == 0 or (x + y) % 5 == 0


PATTERNS: Dict[str, Callable[[int, int], bool]] = {
    "a": _pattern_a,
    "b": _pattern_b,
}


class SimpleMaze(MazeGenerator):
    """Parity-pattern walls; variant ``a`` for level 1, ``b`` for level 2."""

    name = "simple"

    def __init__(self, variant: str = "a") -> None:
        if variant not in PATTERNS:
            raise ValueError(f"unknown SimpleMaze variant {variant!r}")
        self.variant = variant

    def wall_density(self, level: int) -> float:
        return 1 / 3 if self.variant == "a" else 0.4

    def generate(self, level: int, grid: Grid, start: XY, goal: XY, rng: random.Random) -> None:
        path = direct_path(grid, start, goal)
        protected = set(path) | {start, goal}

        is_wall = PATTERNS[self.variant]
        for x, y in grid.cells():
            if is_wall(x, y):
                wall_unless(grid, x, y, protected)

        # Thicken the route's flanks; the route itself stays open.
        for px, py in path[1:-1]:
            if not chance(rng, ADJACENT_WALL_CHANCE):
                continue
            flanks = [c for c in neighbors4(grid, px, py) if c not in protected]
            if flanks:
                fx, fy = rng.choice(flanks)
                wall_unless(grid, fx, fy, protected)

    def __repr__(self) -> str:
        return f"SimpleMaze(variant={self.variant!r})"
