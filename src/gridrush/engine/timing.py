# src/gridrush/engine/timing.py
# Hazard cadence in engine ticks, scaled by level.
# Config values are milliseconds and per-frame speeds at 60 Hz; everything is
# converted to ticks here so the runner only has to call tick().

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_CONFIG, GameConfig

REFERENCE_FPS = 60
PROJECTILE_INTERVAL_SCALE = 0.1  # spawn interval divided by 1 + (level-1)*0.1
PROJECTILE_SPEED_SCALE = 0.2     # speed multiplied by 1 + (level-1)*0.2
ENEMY_SPEED_SCALE = 0.2          # step rate multiplied by 1 + (level-start)*0.2


def ms_to_ticks(ms: float, ticks_per_second: int) -> int:
    return max(1, int(round(ms * ticks_per_second / 1000.0)))


@dataclass
class HazardTiming:
    projectile_period: int     # ticks between projectile spawns
    projectile_speed: float    # tiles per tick
    enemy_spawn_period: int    # ticks between enemy spawn checks
    enemy_step_period: int     # ticks per enemy step
    max_enemies: int           # 0 below the enemy start level


def max_enemies_for(level: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    if level < config.enemy_start_level:
        return 0
    return min(config.max_enemies, level - config.enemy_start_level + 1)


def timing_for(level: int, config: GameConfig = DEFAULT_CONFIG) -> HazardTiming:
    tps = config.ticks_per_second
    interval = config.projectile_interval_ms / (1 + (level - 1) * PROJECTILE_INTERVAL_SCALE)
    speed = config.projectile_speed * (1 + (level - 1) * PROJECTILE_SPEED_SCALE)
    enemy_rate = 1 + max(0, level - config.enemy_start_level) * ENEMY_SPEED_SCALE
    return HazardTiming(
        projectile_period=ms_to_ticks(interval, tps),
        projectile_speed=speed * REFERENCE_FPS / tps,
        enemy_spawn_period=ms_to_ticks(config.enemy_spawn_interval_ms, tps),
        enemy_step_period=ms_to_ticks(config.enemy_step_ms / enemy_rate, tps),
        max_enemies=max_enemies_for(level, config),
    )
