# src/gridrush/engine/state.py
# GameState orchestrator: status machine, score/lives, level lifecycle, hazard ticks.
#
#   IDLE --start()--> PLAYING --goal--> LEVEL_COMPLETE --(new level)--> PLAYING
#                        \--lives 0--> GAME_OVER --restart()--> PLAYING (level 1)

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import XY, Grid
from ..mapgen.generator import Level, LevelController
from ..rng import make_rng
from . import events as E
from .collisions import WALL, Vitals, apply_collision, display_score
from .hazards import HazardManager
from .movement import MoveOutcome, MoveResult, resolve_move

logger = logging.getLogger(__name__)


class Status(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"


@dataclass
class TickOut:
    status: Status
    collisions: List[str] = field(default_factory=list)


class GameState:
    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        *,
        rng: Optional[random.Random] = None,
        listener: Optional[E.Listener] = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else make_rng(config.seed)
        self.controller = LevelController(config, self.rng)
        self.log = E.EventLog(listener=listener)

        self.status = Status.IDLE
        self.vitals = Vitals(score=config.initial_score, lives=config.initial_lives)
        self.level_number = 1
        self.player: XY = (0, 0)
        self.visited: Set[XY] = set()
        self.hazards: Optional[HazardManager] = None

    # ---- Read-only views for collaborators ----
    @property
    def level(self) -> Optional[Level]:
        return self.controller.level

    @property
    def grid(self) -> Grid:
        return self._require_level().grid

    @property
    def start_pos(self) -> XY:
        return self._require_level().start

    @property
    def goal(self) -> XY:
        return self._require_level().goal

    @property
    def score(self) -> int:
        return self.vitals.score

    @property
    def lives(self) -> int:
        return self.vitals.lives

    @property
    def display_score(self) -> int:
        return display_score(self.vitals.score)

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return self.grid.snapshot()

    # ---- Lifecycle ----
    def start(self) -> None:
        if self.status is not Status.IDLE:
            raise RuntimeError(f"start() from {self.status.value}; use restart()")
        self._new_game()

    def restart(self) -> None:
        logger.info("restart from level %d", self.level_number)
        self._new_game()

    def _new_game(self) -> None:
        self.vitals = Vitals(score=self.config.initial_score, lives=self.config.initial_lives)
        self.log.emit(E.SCORE_CHANGED, display_score(self.vitals.score))
        self.log.emit(E.LIVES_CHANGED, self.vitals.lives)
        self._begin_level(1)
        self._set_status(Status.PLAYING)

    def _begin_level(self, number: int) -> None:
        level = self.controller.load(number)
        self.level_number = number
        self.player = level.start
        self.visited = {level.start}
        self.hazards = None
        if self.config.hazards_enabled:
            self.hazards = HazardManager(
                grid=level.grid, goal=level.goal, level=number, rng=self.rng, config=self.config,
            )
        self.log.emit(E.LEVEL_CHANGED, number)

    def _set_status(self, status: Status) -> None:
        if status is self.status:
            return
        self.status = status
        self.log.emit(E.STATUS_CHANGED, status)

    def _require_level(self) -> Level:
        if self.controller.level is None:
            raise RuntimeError("no level loaded; call start() first")
        return self.controller.level

    # ---- Movement ----
    def apply_move(self, direction: str) -> MoveResult:
        if self.status is not Status.PLAYING:
            return MoveResult(MoveOutcome.INACTIVE, self.player)

        level = self._require_level()
        res = resolve_move(
            level.grid, self.player, direction,
            goal=level.goal, level=self.level_number, visited=self.visited,
        )
        if res.outcome is MoveOutcome.WALL:
            self.collide(WALL)
            return res
        if not res.accepted:
            return res

        self.vitals.score -= self.config.step_penalty
        self.log.emit(E.SCORE_CHANGED, display_score(self.vitals.score))
        self.player = res.position
        self.visited.add(res.position)

        if res.outcome is MoveOutcome.GOAL:
            self._complete_level()
        return res

    def _complete_level(self) -> None:
        done = self.level_number
        self._set_status(Status.LEVEL_COMPLETE)
        self.log.emit(E.LEVEL_COMPLETE, done)
        logger.info("level %d complete, score %d", done, self.vitals.score)
        self._begin_level(done + 1)
        self._set_status(Status.PLAYING)

    # ---- Collisions ----
    def collide(self, kind: str) -> bool:
        """Apply the shared penalty for ``kind``. Returns True if the game ended."""
        if self.status is not Status.PLAYING:
            return False
        dead = apply_collision(self.vitals, kind, self.config.death_penalty)
        self.log.emit(E.COLLISION, kind)
        self.log.emit(E.LIVES_CHANGED, self.vitals.lives)
        self.log.emit(E.SCORE_CHANGED, display_score(self.vitals.score))
        if dead:
            self._game_over()
        return dead

    def _game_over(self) -> None:
        self._set_status(Status.GAME_OVER)
        self.hazards = None
        final = (display_score(self.vitals.score), self.level_number)
        self.log.emit(E.GAME_OVER, final)
        logger.info("game over at level %d, score %d", self.level_number, self.vitals.score)

    # ---- Tick orchestration ----
    def tick(self) -> TickOut:
        out = TickOut(status=self.status)
        if self.status is not Status.PLAYING or self.hazards is None:
            return out
        hev = self.hazards.tick(self.player)
        for kind in hev.collisions:
            out.collisions.append(kind)
            if self.collide(kind):
                break
        out.status = self.status
        return out
