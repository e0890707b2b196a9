"""GridRush game core: maze generation, pathfinding and movement."""

from .config import DEFAULT_CONFIG, GameConfig
from .errors import OutOfBounds
from .grid import Grid, create_grid, is_within_bounds
from .pathfind import find_path

__all__ = [
    "DEFAULT_CONFIG",
    "GameConfig",
    "Grid",
    "OutOfBounds",
    "create_grid",
    "find_path",
    "is_within_bounds",
]
