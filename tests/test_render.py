import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from gridrush.mapgen.generator import Level, describe_level  # noqa: E402
from gridrush.render.image import render_level, save_level_png  # noqa: E402
from gridrush.render.palette import COLORS, ENEMY, FLOOR, GOAL, PLAYER, START, WALL_KEY  # noqa: E402
from gridrush.render.tileset import Tileset  # noqa: E402

from helpers import grid_from_rows  # noqa: E402


def small_level():
    grid = grid_from_rows([
        "..#.",
        "..#.",
        "....",
        "....",
    ])
    return Level(describe_level(1), grid, (0, 0), (3, 3), [])


def test_render_level_colours_cells():
    img = render_level(small_level(), tile_size=8)
    assert img.size == (32, 32)
    assert img.getpixel((3, 3)) == COLORS[START]
    assert img.getpixel((27, 27)) == COLORS[GOAL]
    assert img.getpixel((19, 4)) == COLORS[WALL_KEY]
    assert img.getpixel((12, 20)) == COLORS[FLOOR]


def test_render_level_with_margin_and_player():
    img = render_level(small_level(), tile_size=16, margin=2, player=(1, 2))
    assert img.size == (68, 68)
    assert img.getpixel((0, 0))[3] == 0
    assert img.getpixel((2 + 16 + 8, 2 + 32 + 8)) == COLORS[PLAYER]


def test_save_level_png(tmp_path):
    out = tmp_path / "level.png"
    save_level_png(small_level(), str(out), tile_size=4)
    assert out.exists() and out.stat().st_size > 0


def test_tileset_surfaces():
    ts = Tileset(12)
    wall = ts.get(WALL_KEY)
    assert wall.get_size() == (12, 12)
    assert tuple(wall.get_at((6, 6))) == COLORS[WALL_KEY]
    assert tuple(wall.get_at((0, 0))) == COLORS[FLOOR]
    assert ts.get(WALL_KEY) is wall


def test_tileset_markers_are_transparent_round_the_edge():
    ts = Tileset(12)
    enemy = ts.get(ENEMY)
    assert enemy.get_at((0, 0)).a == 0
    assert tuple(enemy.get_at((6, 6))) == COLORS[ENEMY]
    assert ts.view(ENEMY, 24).get_size() == (24, 24)


def test_tileset_rejects_unknown_key_and_tiny_tiles():
    with pytest.raises(KeyError):
        Tileset(8).get("lava")
    with pytest.raises(ValueError):
        Tileset(1)
