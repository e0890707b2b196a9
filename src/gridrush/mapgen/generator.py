# src/gridrush/mapgen/generator.py
# Level controller: picks a strategy per level, places start/goal, then validates and repairs.

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import XY, Grid, create_grid
from ..rng import level_rng, make_rng
from ..tiles import OPEN
from .base import MazeGenerator
from .goals import RANDOM_GOAL_FROM_LEVEL, START, goal_for_level
from .repair import ensure_solvable
from .rooms import RoomMaze
from .simple import SimpleMaze
from .spiral import SpiralMaze
from .winding import WindingMaze

logger = logging.getLogger(__name__)

# Indexed by level % 3 for levels 3 and up: 3 -> rooms, 4 -> spiral, 5 -> winding, ...
COMPLEX_CYCLE: Tuple[type, ...] = (RoomMaze, SpiralMaze, WindingMaze)


def select_generator(level: int) -> MazeGenerator:
    if level < 1:
        raise ValueError(f"levels are 1-based, got {level}")
    if level == 1:
        return SimpleMaze("a")
    if level == 2:
        return SimpleMaze("b")
    return COMPLEX_CYCLE[level % 3]()


@dataclass(frozen=True)
class LevelDescriptor:
    number: int
    generator: str
    wall_density: float
    goal_rule: str  # "fixed" | "random"


def describe_level(level: int) -> LevelDescriptor:
    gen = select_generator(level)
    return LevelDescriptor(
        number=level,
        generator=gen.name,
        wall_density=gen.wall_density(level),
        goal_rule="random" if level >= RANDOM_GOAL_FROM_LEVEL else "fixed",
    )


@dataclass
class Level:
    descriptor: LevelDescriptor
    grid: Grid
    start: XY
    goal: XY
    path: List[XY] = field(default_factory=list)
    repaired: bool = False

    @property
    def number(self) -> int:
        return self.descriptor.number

    @property
    def size(self) -> int:
        return self.grid.size


def generate_level(
    level: int,
    config: GameConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> Level:
    """Build a solvable level. ``rng`` defaults to one derived from ``config.seed``."""
    if rng is None:
        rng = level_rng(config.seed, level, make_rng())
    descriptor = describe_level(level)
    gen = select_generator(level)

    grid = create_grid(config.grid_size)
    start = START
    goal = goal_for_level(
        level,
        grid.size,
        rng,
        start=start,
        min_ratio=config.goal_min_distance_ratio,
        max_attempts=config.max_placement_attempts,
    )
    logger.debug("level %d: %r, goal %s", level, gen, goal)

    gen.generate(level, grid, start, goal, rng)

    grid.set(*start, OPEN)
    grid.set(*goal, OPEN)
    path, repaired = ensure_solvable(grid, start, goal)

    return Level(descriptor=descriptor, grid=grid, start=start, goal=goal, path=path, repaired=repaired)


class LevelController:
    """
    Owns the active level. Each ``load`` replaces the level wholesale; the
    previous grid is never mutated again.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else make_rng(config.seed)
        self.level: Optional[Level] = None

    def rng_for(self, number: int) -> random.Random:
        return level_rng(self.config.seed, number, self._rng)

    def load(self, number: int) -> Level:
        self.level = generate_level(number, self.config, self.rng_for(number))
        return self.level

    def next(self) -> Level:
        current = self.level.number if self.level is not None else 0
        return self.load(current + 1)
