# src/gridrush/engine/collisions.py
# One collision contract for every hazard kind: lose a life, pay the death penalty.

from __future__ import annotations

from dataclasses import dataclass

WALL = "wall"
PROJECTILE = "projectile"
ENEMY = "enemy"
COLLISION_KINDS = (WALL, PROJECTILE, ENEMY)


@dataclass
class Vitals:
    score: int
    lives: int

    @property
    def dead(self) -> bool:
        return self.lives <= 0


def display_score(score: int) -> int:
    # Score may run negative internally; events and HUDs only ever carry this value.
    return max(0, score)


def apply_collision(vitals: Vitals, kind: str, death_penalty: int) -> bool:
    """Apply one hit of ``kind``. Returns True when it used up the last life."""
    if kind not in COLLISION_KINDS:
        raise ValueError(f"unknown collision kind {kind!r}")
    vitals.lives -= 1
    vitals.score -= death_penalty
    return vitals.dead
