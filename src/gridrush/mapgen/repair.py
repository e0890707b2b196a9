# src/gridrush/mapgen/repair.py
# Post-generation validation and the guaranteed-path fallback.

from __future__ import annotations

import logging
from typing import List, Tuple

from ..grid import XY, Grid
from ..pathfind import find_path
from ..tiles import OPEN

logger = logging.getLogger(__name__)


def _run(a: int, b: int) -> range:
    step = 1 if b >= a else -1
    return range(a, b + step, step)


def l_corridor_cells(start: XY, goal: XY) -> List[XY]:
    """
    Horizontal along start's row to goal's column, then vertical to goal.
    Contiguous and inclusive of both endpoints.
    """
    sx, sy = start
    gx, gy = goal
    cells = [(x, sy) for x in _run(sx, gx)]
    cells.extend((gx, y) for y in _run(sy, gy) if y != sy)
    return cells


def carve_l_corridor(grid: Grid, start: XY, goal: XY) -> List[XY]:
    """Open every cell of the L route. Only ever opens cells."""
    cells = l_corridor_cells(start, goal)
    for x, y in cells:
        grid.set(x, y, OPEN)
    return cells


def ensure_solvable(grid: Grid, start: XY, goal: XY) -> Tuple[List[XY], bool]:
    """
    Validate ``grid`` and repair it if needed.

    Returns ``(path, repaired)``; ``path`` is never empty.
    """
    path = find_path(grid, start, goal)
    if path:
        return path, False
    logger.info("no route %s -> %s; carving L corridor", start, goal)
    carve_l_corridor(grid, start, goal)
    path = find_path(grid, start, goal)
    # The corridor itself is a route, so this holds by construction.
    assert path, "L corridor failed to connect start and goal"
    return path, True
