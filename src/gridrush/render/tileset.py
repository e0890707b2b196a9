from __future__ import annotations

from functools import lru_cache

import pygame

from .palette import COLORS, FLOOR, MARKERS


class Tileset:
    """
    Tiny cached surface factory for the pygame runner:
      - one square surface per palette key, exactly (tile_size, tile_size)
      - marker keys (player/projectile/enemy) are a filled circle on transparency
    Needs no display or font module, so it works headless.
    """

    def __init__(self, tile_size: int):
        if tile_size < 2:
            raise ValueError("tile_size must be at least 2 pixels")
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, key: str) -> pygame.Surface:
        if key not in COLORS:
            raise KeyError(key)
        size = self.tile_size
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        if key in MARKERS:
            radius = max(1, size // 3)
            pygame.draw.circle(img, COLORS[key], (size // 2, size // 2), radius)
        else:
            img.fill(COLORS[key])
            # thin floor-coloured gutter so adjacent walls read as blocks
            if key != FLOOR:
                pygame.draw.rect(img, COLORS[FLOOR], img.get_rect(), 1)
        return img

    @lru_cache(maxsize=256)
    def view(self, key: str, size: int) -> pygame.Surface:
        base = self.get(key)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
