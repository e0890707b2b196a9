# Shared colours for the pygame and Pillow renderers (RGBA).
from typing import Dict, Tuple

from ..tiles import OPEN, WALL

RGBA = Tuple[int, int, int, int]

FLOOR = "floor"
WALL_KEY = "wall"
START = "start"
GOAL = "goal"
PLAYER = "player"
PROJECTILE = "projectile"
ENEMY = "enemy"
VISITED = "visited"

COLORS: Dict[str, RGBA] = {
    FLOOR: (120, 120, 128, 255),
    WALL_KEY: (34, 34, 204, 255),
    START: (51, 51, 255, 255),
    GOAL: (51, 255, 51, 255),
    PLAYER: (255, 0, 0, 255),
    PROJECTILE: (255, 204, 0, 255),
    ENEMY: (255, 51, 51, 255),
    VISITED: (96, 96, 104, 255),
}

# Markers are drawn over a floor cell rather than filling it.
MARKERS = (PLAYER, PROJECTILE, ENEMY)


def cell_key(cell: int) -> str:
    if cell == WALL:
        return WALL_KEY
    if cell == OPEN:
        return FLOOR
    raise ValueError(f"unknown cell state {cell!r}")
