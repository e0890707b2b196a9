import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

M = 0x7FFFFFFF  # 2^31-1
LEVEL_STRIDE = 48271


def make_rng(seed: Optional[int] = None) -> random.Random:
    """A fresh source; ``None`` seeds from the OS."""
    return random.Random(seed)


def seed_for_level(base_seed: int, level: int) -> int:
    """
    Derive the generation seed for a level from the session seed.

    Each level gets its own stream so a level's layout does not depend on
    how many hazard draws happened while the previous level was played.
    """
    return (base_seed * LEVEL_STRIDE + level * 0x0FCDD36) % M


def level_rng(base_seed: Optional[int], level: int, fallback: random.Random) -> random.Random:
    if base_seed is None:
        return fallback
    return random.Random(seed_for_level(base_seed, level))


def chance(rng: random.Random, p: float) -> bool:
    return rng.random() < p


def shuffled(rng: random.Random, items: Sequence[T]) -> List[T]:
    out = list(items)
    rng.shuffle(out)
    return out
