# tools/run_game.py
# Keyboard-driven pygame runner for playing levels locally.
# Arrows/WASD move, R restarts, Esc quits. HUD is a one-line debug strip.

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import pygame

try:
    from gridrush.config import GameConfig, load_config
    from gridrush.engine.state import GameState, Status
    from gridrush.render import palette
    from gridrush.render.tileset import Tileset
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

KEY_TO_DIR = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}

HUD_HEIGHT = 22


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="GridRush runtime")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--size", type=int, default=None, help="grid side length")
    parser.add_argument("--tile", type=int, default=48, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--no-hazards", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    cfg = load_config(args.config) if args.config else GameConfig()
    overrides = {"ticks_per_second": args.fps}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.size is not None:
        overrides["grid_size"] = args.size
    if args.no_hazards:
        overrides["hazards_enabled"] = False
    cfg = replace(cfg, **overrides)

    game = GameState(cfg)
    game.start()

    pygame.init()
    n = cfg.grid_size
    screen = pygame.display.set_mode((n * args.tile, n * args.tile + HUD_HEIGHT))
    pygame.display.set_caption("GridRush")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 16)
    tiles = Tileset(args.tile)

    def blit(key: str, x: float, y: float) -> None:
        screen.blit(tiles.get(key), (int(x * args.tile), int(y * args.tile)))

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.restart()
                elif event.key in KEY_TO_DIR:
                    game.apply_move(KEY_TO_DIR[event.key])

        game.tick()

        screen.fill((0, 0, 0))
        grid = game.grid
        for x, y in grid.cells():
            blit(palette.cell_key(grid.get(x, y)), x, y)
            if (x, y) in game.visited and grid.is_open(x, y):
                blit(palette.VISITED, x, y)
        blit(palette.START, *game.start_pos)
        blit(palette.GOAL, *game.goal)
        if game.hazards is not None:
            for p in game.hazards.projectiles:
                blit(palette.PROJECTILE, p.x, p.y)
            for e in game.hazards.enemies:
                blit(palette.ENEMY, e.x, e.y)
        blit(palette.PLAYER, *game.player)

        status = "GAME OVER - press R" if game.status is Status.GAME_OVER else game.level.descriptor.generator
        hud = f"level {game.level_number}  score {game.display_score}  lives {max(0, game.lives)}  {status}"
        screen.blit(font.render(hud, True, (255, 255, 0)), (4, n * args.tile + 3))

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
