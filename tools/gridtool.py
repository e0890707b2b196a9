#!/usr/bin/env python3
# Dump generated levels as TSV: one row per grid row, 0 open / 1 wall.
import argparse, csv, os
from gridrush.config import GameConfig
from gridrush.mapgen.generator import Level, generate_level

def level_header(level: Level):
    d = level.descriptor
    return [f"# level={d.number}", f"generator={d.generator}", f"start={level.start[0]},{level.start[1]}",
            f"goal={level.goal[0]},{level.goal[1]}", f"repaired={int(level.repaired)}"]

def write_level_tsv(level: Level, path, with_header=True):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if with_header:
            w.writerow(level_header(level))
        w.writerows(level.grid.as_matrix())

def cmd_emit(args, cfg):
    level = generate_level(args.level, cfg)
    write_level_tsv(level, args.out, with_header=not args.bare)
    print(f"Wrote {args.out} ({level.descriptor.generator}, goal {level.goal}, route {len(level.path)})")

def cmd_pack(args, cfg):
    os.makedirs(args.outdir, exist_ok=True)
    repaired = 0
    for lvl in range(1, args.levels + 1):
        level = generate_level(lvl, cfg)
        repaired += level.repaired
        write_level_tsv(level, os.path.join(args.outdir, f"{lvl:02d}_{level.descriptor.generator}.tsv"))
    print(f"Wrote {args.levels} levels to {args.outdir} ({repaired} needed the corridor fallback)")

def main(argv=None):
    p = argparse.ArgumentParser(description="GridRush level dumps")
    p.add_argument('--seed', type=int, default=41)
    p.add_argument('--size', type=int, default=10)
    sub = p.add_subparsers(dest='cmd', required=True)
    emit = sub.add_parser('emit', help='write one level')
    emit.add_argument('--level', type=int, required=True)
    emit.add_argument('--out', type=str, required=True)
    emit.add_argument('--bare', action='store_true', help='omit the descriptor row')
    emit.set_defaults(func=cmd_emit)
    pack = sub.add_parser('pack', help='write levels 1..N')
    pack.add_argument('--levels', type=int, default=12)
    pack.add_argument('--outdir', type=str, required=True)
    pack.set_defaults(func=cmd_pack)
    args = p.parse_args(argv)
    args.func(args, GameConfig(grid_size=args.size, seed=args.seed))
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
