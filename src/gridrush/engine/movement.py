# src/gridrush/engine/movement.py
# Classifies a proposed single-step move against the grid and visited set.
# Pure: the caller (GameState) applies score/lives/position effects.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Dict, Optional

from ..grid import XY, Grid
from ..tiles import WALL

DIRECTIONS: Dict[str, XY] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

NO_REVISIT_FROM_LEVEL = 2


class MoveOutcome(Enum):
    MOVED = "moved"
    GOAL = "goal"
    OUT_OF_BOUNDS = "out_of_bounds"
    WALL = "wall"
    VISITED = "visited"
    INVALID = "invalid"    # not one of up/down/left/right
    INACTIVE = "inactive"  # game not in play

    @property
    def accepted(self) -> bool:
        return self in (MoveOutcome.MOVED, MoveOutcome.GOAL)


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    position: XY                 # player position after the move
    candidate: Optional[XY] = None

    @property
    def accepted(self) -> bool:
        return self.outcome.accepted


def step(pos: XY, direction: str) -> Optional[XY]:
    d = DIRECTIONS.get(direction)
    if d is None:
        return None
    return (pos[0] + d[0], pos[1] + d[1])


def resolve_move(
    grid: Grid,
    pos: XY,
    direction: str,
    *,
    goal: XY,
    level: int,
    visited: AbstractSet[XY],
) -> MoveResult:
    candidate = step(pos, direction)
    if candidate is None:
        return MoveResult(MoveOutcome.INVALID, pos)
    if not grid.in_bounds(*candidate):
        return MoveResult(MoveOutcome.OUT_OF_BOUNDS, pos, candidate)
    if grid.get(*candidate) == WALL:
        return MoveResult(MoveOutcome.WALL, pos, candidate)
    if level >= NO_REVISIT_FROM_LEVEL and candidate in visited:
        return MoveResult(MoveOutcome.VISITED, pos, candidate)
    if candidate == goal:
        return MoveResult(MoveOutcome.GOAL, candidate, candidate)
    return MoveResult(MoveOutcome.MOVED, candidate, candidate)
