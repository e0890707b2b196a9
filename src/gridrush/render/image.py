# Render a generated level to a Pillow image (floor, walls, start, goal, optional route).

from __future__ import annotations

from typing import Iterable, Optional

from PIL import Image, ImageDraw

from ..grid import XY
from ..mapgen.generator import Level
from .palette import COLORS, GOAL, PLAYER, START, cell_key

ROUTE_COLOR = (255, 255, 255, 160)


def render_level(
    level: Level,
    tile_size: int = 16,
    margin: int = 0,
    route: Optional[Iterable[XY]] = None,
    player: Optional[XY] = None,
) -> Image.Image:
    n = level.size
    side = n * tile_size + 2 * margin
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas, "RGBA")

    def box(x: int, y: int, inset: int = 0):
        inset = min(inset, (tile_size - 1) // 2)
        x0 = margin + x * tile_size + inset
        y0 = margin + y * tile_size + inset
        return (x0, y0, x0 + tile_size - 1 - 2 * inset, y0 + tile_size - 1 - 2 * inset)

    for x, y in level.grid.cells():
        draw.rectangle(box(x, y), fill=COLORS[cell_key(level.grid.get(x, y))])
    draw.rectangle(box(*level.start), fill=COLORS[START])
    draw.rectangle(box(*level.goal), fill=COLORS[GOAL])

    if route is not None:
        inset = max(1, tile_size // 3)
        for x, y in route:
            draw.rectangle(box(x, y, inset), fill=ROUTE_COLOR)
    if player is not None:
        draw.ellipse(box(*player, max(1, tile_size // 4)), fill=COLORS[PLAYER])
    return canvas


def save_level_png(level: Level, path: str, tile_size: int = 16, with_route: bool = False) -> None:
    img = render_level(level, tile_size=tile_size, route=level.path if with_route else None)
    img.save(path)
