# src/gridrush/mapgen/goals.py
# Goal placement: hand-picked quadrants for the first levels, distance-gated sampling later.

from __future__ import annotations

import logging
import random
from typing import Dict

from ..grid import XY
from ..pathfind import manhattan

logger = logging.getLogger(__name__)

START: XY = (0, 0)
RANDOM_GOAL_FROM_LEVEL = 5


def fixed_goal(level: int, size: int) -> XY:
    """
    Levels 1-4, each in a different quadrant relative to the top-left start:
    near centre, top-right, bottom-left, far corner.
    """
    last = size - 1
    mid = max(1, size // 2 - 1)
    table: Dict[int, XY] = {
        1: (mid, mid),
        2: (last - 1, 1),
        3: (1, last - 1),
        4: (last, last),
    }
    return table[level]


def min_goal_distance(size: int, ratio: float) -> int:
    return int(size * ratio)


def random_goal(
    size: int,
    start: XY,
    rng: random.Random,
    *,
    min_ratio: float = 0.6,
    max_attempts: int = 200,
) -> XY:
    """
    Sample until the Manhattan distance from ``start`` reaches
    ``floor(size * min_ratio)``. Falls back to the far corner after
    ``max_attempts`` rejections.
    """
    threshold = min_goal_distance(size, min_ratio)
    for _ in range(max_attempts):
        pos = (rng.randrange(size), rng.randrange(size))
        if pos != start and manhattan(pos, start) >= threshold:
            return pos
    fallback = (size - 1, size - 1)
    logger.warning("goal sampling gave up after %d attempts; using %s", max_attempts, fallback)
    return fallback


def goal_for_level(
    level: int,
    size: int,
    rng: random.Random,
    *,
    start: XY = START,
    min_ratio: float = 0.6,
    max_attempts: int = 200,
) -> XY:
    if level < RANDOM_GOAL_FROM_LEVEL:
        return fixed_goal(level, size)
    return random_goal(size, start, rng, min_ratio=min_ratio, max_attempts=max_attempts)
