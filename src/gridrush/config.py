from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

MIN_GRID_SIZE = 3


@dataclass(frozen=True)
class GameConfig:
    # Board
    grid_size: int = 10

    # Scoring (score may go negative internally; only display clamps)
    initial_lives: int = 3
    initial_score: int = 1000
    step_penalty: int = 10
    death_penalty: int = 100

    # Hazards; times in ms, projectile speed in tiles per frame at 60 Hz
    hazards_enabled: bool = True
    projectile_speed: float = 0.03      # tiles per frame at 60 Hz
    projectile_interval_ms: int = 2000
    projectile_hit_radius: float = 0.4
    enemy_start_level: int = 5
    enemy_spawn_interval_ms: int = 5000
    enemy_step_ms: int = 1000
    max_enemies: int = 3
    enemy_min_spawn_distance: float = 3.0

    # Generation
    goal_min_distance_ratio: float = 0.6
    max_placement_attempts: int = 200

    ticks_per_second: int = 60
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be >= {MIN_GRID_SIZE}, got {self.grid_size}")
        if self.initial_lives < 1:
            raise ValueError("initial_lives must be positive")
        if self.ticks_per_second < 1:
            raise ValueError("ticks_per_second must be positive")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be positive")

    @classmethod
    def from_dict(cls, raw: Any) -> "GameConfig":
        """
        Build a config from parsed JSON. Unknown keys are ignored and values
        that cannot be coerced to the field's type fall back to the default.
        """
        if not isinstance(raw, dict):
            return cls()
        defaults = cls()
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in raw:
                continue
            value = raw[f.name]
            default = getattr(defaults, f.name)
            if f.name == "seed":
                if value is None:
                    kwargs["seed"] = None
                    continue
                try:
                    kwargs["seed"] = int(value)
                except (TypeError, ValueError):
                    pass
                continue
            try:
                if isinstance(default, bool):
                    if isinstance(value, bool) or value in (0, 1):
                        kwargs[f.name] = bool(value)
                elif isinstance(default, int):
                    kwargs[f.name] = int(value)
                elif isinstance(default, float):
                    kwargs[f.name] = float(value)
            except (TypeError, ValueError):
                continue
        return cls(**kwargs)


def load_config(path: Path) -> GameConfig:
    """Load a JSON config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or a value is out of range.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON at line {e.lineno}, col {e.colno}: {e.msg}") from e
    return GameConfig.from_dict(raw)


# Global defaults (a launcher may load its own)
DEFAULT_CONFIG = GameConfig()
