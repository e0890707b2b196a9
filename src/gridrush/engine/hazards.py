# src/gridrush/engine/hazards.py
# Projectiles and chasing enemies. Motion lives here; the life/score penalty
# is applied by GameState through the shared collision contract.
#
# - Projectiles enter from a random edge, one lane per spawn, and fly straight.
#   They vanish off-grid, on a wall cell, or on hitting the player.
# - Enemies appear from the enemy start level, on an open cell away from the
#   player and never on the goal. Each step goes along the dominant axis toward
#   the player; when that is blocked they take the first open direction in a
#   shuffled order. Touching the player consumes the enemy.

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import XY, Grid
from ..pathfind import NEIGHBOR_STEPS
from ..rng import shuffled
from ..tiles import WALL
from .collisions import ENEMY, PROJECTILE
from .timing import HazardTiming, timing_for

logger = logging.getLogger(__name__)

TOP, RIGHT, BOTTOM, LEFT = range(4)


@dataclass
class Projectile:
    x: float
    y: float
    dx: int
    dy: int
    speed: float  # tiles per tick

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def cell(self) -> XY:
        return (math.floor(self.x), math.floor(self.y))

    def advance(self) -> None:
        self.x += self.dx * self.speed
        self.y += self.dy * self.speed

    def off_grid(self, size: int) -> bool:
        return self.x < -1 or self.x > size or self.y < -1 or self.y > size

    def distance_to(self, pos: XY) -> float:
        return math.hypot(self.x - pos[0], self.y - pos[1])


@dataclass
class Enemy:
    x: int
    y: int

    @property
    def pos(self) -> XY:
        return (self.x, self.y)


@dataclass
class HazardTickEvents:
    collisions: List[str] = field(default_factory=list)
    spawned_projectiles: int = 0
    spawned_enemies: int = 0


def edge_spawn(edge: int, lane: int, size: int) -> Tuple[float, float, int, int]:
    """Position just outside ``edge`` at ``lane`` and the inward heading."""
    if edge == TOP:
        return (float(lane), -1.0, 0, 1)
    if edge == RIGHT:
        return (float(size), float(lane), -1, 0)
    if edge == BOTTOM:
        return (float(lane), float(size), 0, -1)
    if edge == LEFT:
        return (-1.0, float(lane), 1, 0)
    raise ValueError(f"unknown edge {edge}")


def chase_step(enemy: Enemy, target: XY) -> XY:
    """Unit step along the dominant axis toward ``target`` (vertical on ties)."""
    dx = target[0] - enemy.x
    dy = target[1] - enemy.y
    if abs(dx) > abs(dy):
        return (1 if dx > 0 else -1, 0)
    return (0, 1 if dy > 0 else -1)


@dataclass
class HazardManager:
    grid: Grid
    goal: XY
    level: int
    rng: random.Random
    config: GameConfig = DEFAULT_CONFIG
    timing: Optional[HazardTiming] = None
    projectiles: List[Projectile] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    _projectile_cooldown: int = 1
    _enemy_spawn_cooldown: int = 1
    _enemy_step_cooldown: int = 0

    def __post_init__(self) -> None:
        if self.timing is None:
            self.timing = timing_for(self.level, self.config)
        self._enemy_step_cooldown = self.timing.enemy_step_period

    @property
    def size(self) -> int:
        return self.grid.size

    # ---------- Main tick ----------
    def tick(self, player_pos: XY) -> HazardTickEvents:
        ev = HazardTickEvents()

        self._projectile_cooldown -= 1
        if self._projectile_cooldown <= 0:
            self.spawn_projectile()
            ev.spawned_projectiles += 1
            self._projectile_cooldown = self.timing.projectile_period

        if self.timing.max_enemies > 0:
            self._enemy_spawn_cooldown -= 1
            if self._enemy_spawn_cooldown <= 0:
                self._enemy_spawn_cooldown = self.timing.enemy_spawn_period
                if len(self.enemies) < self.timing.max_enemies and self.spawn_enemy(player_pos):
                    ev.spawned_enemies += 1

        self._advance_projectiles(player_pos, ev)

        self._enemy_step_cooldown -= 1
        if self._enemy_step_cooldown <= 0:
            self._enemy_step_cooldown = self.timing.enemy_step_period
            for e in self.enemies:
                self._step_enemy(e, player_pos)
        self._resolve_enemy_contacts(player_pos, ev)

        return ev

    # ---------- Spawning ----------
    def spawn_projectile(self) -> Projectile:
        edge = self.rng.randrange(4)
        lane = self.rng.randrange(self.size)
        x, y, dx, dy = edge_spawn(edge, lane, self.size)
        p = Projectile(x, y, dx, dy, self.timing.projectile_speed)
        self.projectiles.append(p)
        logger.debug("projectile from edge %d lane %d", edge, lane)
        return p

    def spawn_enemy(self, player_pos: XY) -> Optional[Enemy]:
        min_dist = self.config.enemy_min_spawn_distance
        for _ in range(self.config.max_placement_attempts):
            x = self.rng.randrange(self.size)
            y = self.rng.randrange(self.size)
            if self.grid.get(x, y) == WALL or (x, y) == self.goal:
                continue
            if math.hypot(x - player_pos[0], y - player_pos[1]) <= min_dist:
                continue
            e = Enemy(x, y)
            self.enemies.append(e)
            logger.debug("enemy at %s", e.pos)
            return e
        logger.warning("no enemy spawn cell after %d attempts", self.config.max_placement_attempts)
        return None

    # ---------- Motion ----------
    def _advance_projectiles(self, player_pos: XY, ev: HazardTickEvents) -> None:
        kept: List[Projectile] = []
        for p in self.projectiles:
            p.advance()
            if p.off_grid(self.size):
                continue
            if p.distance_to(player_pos) < self.config.projectile_hit_radius:
                ev.collisions.append(PROJECTILE)
                continue
            cx, cy = p.cell
            if self.grid.in_bounds(cx, cy) and self.grid.get(cx, cy) == WALL:
                continue
            kept.append(p)
        self.projectiles = kept

    def _passable(self, x: int, y: int) -> bool:
        return self.grid.in_bounds(x, y) and self.grid.get(x, y) != WALL

    def _step_enemy(self, e: Enemy, player_pos: XY) -> None:
        dx, dy = chase_step(e, player_pos)
        if self._passable(e.x + dx, e.y + dy):
            e.x, e.y = e.x + dx, e.y + dy
            return
        for dx, dy in shuffled(self.rng, NEIGHBOR_STEPS):
            if self._passable(e.x + dx, e.y + dy):
                e.x, e.y = e.x + dx, e.y + dy
                return

    def _resolve_enemy_contacts(self, player_pos: XY, ev: HazardTickEvents) -> None:
        hits = [e for e in self.enemies if e.pos == player_pos]
        if not hits:
            return
        for _ in hits:
            ev.collisions.append(ENEMY)
        self.enemies = [e for e in self.enemies if e.pos != player_pos]
