#!/usr/bin/env python3
# Render generated levels 1..K to PNGs using Pillow.

import argparse, os
from gridrush.config import GameConfig
from gridrush.mapgen.generator import generate_level
from gridrush.render.image import save_level_png

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--levels", type=int, default=12, help="Render levels 1..N")
    ap.add_argument("--seed", type=int, default=41)
    ap.add_argument("--size", type=int, default=10, help="Grid side length")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--route", action="store_true", help="Overlay the validated route")
    args = ap.parse_args()

    cfg = GameConfig(grid_size=args.size, seed=args.seed)
    os.makedirs(args.outdir, exist_ok=True)
    for lvl in range(1, args.levels + 1):
        level = generate_level(lvl, cfg)
        png = os.path.join(args.outdir, f"{lvl:02d}_{level.descriptor.generator}.png")
        save_level_png(level, png, tile_size=args.tile, with_route=args.route)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
