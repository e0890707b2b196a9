# src/gridrush/engine/events.py
# State deltas published to renderer/HUD collaborators.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

SCORE_CHANGED = "score_changed"
LIVES_CHANGED = "lives_changed"
LEVEL_CHANGED = "level_changed"
LEVEL_COMPLETE = "level_complete"
GAME_OVER = "game_over"            # value: (final_score, final_level)
COLLISION = "collision"            # value: "wall" | "projectile" | "enemy"
STATUS_CHANGED = "status_changed"  # value: Status


@dataclass(frozen=True)
class GameEvent:
    kind: str
    value: Any = None


Listener = Callable[[GameEvent], None]


@dataclass
class EventLog:
    """Keeps every event of the session and forwards each one to an optional listener."""

    listener: Optional[Listener] = None
    events: List[GameEvent] = field(default_factory=list)

    def emit(self, kind: str, value: Any = None) -> GameEvent:
        ev = GameEvent(kind, value)
        self.events.append(ev)
        if self.listener is not None:
            self.listener(ev)
        return ev

    def of_kind(self, kind: str) -> List[Any]:
        return [e.value for e in self.events if e.kind == kind]

    def kinds(self) -> List[str]:
        return [e.kind for e in self.events]

    def clear(self) -> None:
        self.events.clear()
