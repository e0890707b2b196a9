# src/gridrush/mapgen/rooms.py
# 3x3 rooms separated by wall lines, one door per shared wall, clustered obstacles inside.

from __future__ import annotations

import random
from typing import List, Tuple

from ..grid import XY, Grid
from ..rng import chance
from ..tiles import OPEN, WALL
from .base import MazeGenerator

ROOMS_PER_SIDE = 3
OBSTACLES_MIN, OBSTACLES_MAX = 2, 4
CLUSTER_CHANCE = 0.4

Span = Tuple[int, int]  # inclusive


def wall_lines(size: int) -> List[int]:
    """Coordinates of the interior partition lines: multiples of size // 3."""
    step = size // ROOMS_PER_SIDE
    return [step * k for k in range(1, ROOMS_PER_SIDE)]


def room_spans(size: int) -> List[Span]:
    """Inclusive coordinate span of each room along one axis, between the lines."""
    lines = wall_lines(size)
    bounds = [-1] + lines + [size]
    return [(bounds[i] + 1, bounds[i + 1] - 1) for i in range(ROOMS_PER_SIDE)]


def _span_ok(span: Span) -> bool:
    return span[0] <= span[1]


class RoomMaze(MazeGenerator):
    name = "rooms"

    def wall_density(self, level: int) -> float:
        return 0.45

    def generate(self, level: int, grid: Grid, start: XY, goal: XY, rng: random.Random) -> None:
        n = grid.size
        lines = wall_lines(n)
        spans = room_spans(n)
        keep = {start, goal}

        for x, y in grid.cells():
            if x in lines or y in lines:
                grid.set(x, y, WALL)

        # Doors through vertical walls (left/right neighbours), then horizontal walls (up/down).
        for row in range(ROOMS_PER_SIDE):
            if not _span_ok(spans[row]):
                continue
            for col in range(ROOMS_PER_SIDE - 1):
                y = rng.randint(*spans[row])
                grid.set(lines[col], y, OPEN)
        for col in range(ROOMS_PER_SIDE):
            if not _span_ok(spans[col]):
                continue
            for row in range(ROOMS_PER_SIDE - 1):
                x = rng.randint(*spans[col])
                grid.set(x, lines[row], OPEN)

        for row in range(ROOMS_PER_SIDE):
            for col in range(ROOMS_PER_SIDE):
                xs, ys = spans[col], spans[row]
                if _span_ok(xs) and _span_ok(ys):
                    self._scatter(grid, xs, ys, keep, rng)

    def _scatter(self, grid: Grid, xs: Span, ys: Span, keep: set, rng: random.Random) -> None:
        def inside(x: int, y: int) -> bool:
            return xs[0] <= x <= xs[1] and ys[0] <= y <= ys[1]

        for _ in range(rng.randint(OBSTACLES_MIN, OBSTACLES_MAX)):
            x = rng.randint(*xs)
            y = rng.randint(*ys)
            if (x, y) in keep:
                continue
            grid.set(x, y, WALL)
            if chance(rng, CLUSTER_CHANCE):
                dx, dy = rng.choice(((1, 0), (-1, 0), (0, 1), (0, -1)))
                ex, ey = x + dx, y + dy
                if inside(ex, ey) and (ex, ey) not in keep:
                    grid.set(ex, ey, WALL)
