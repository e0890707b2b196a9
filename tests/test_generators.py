import random

import pytest

from gridrush.grid import create_grid
from gridrush.mapgen.base import buffer_zone
from gridrush.mapgen.rooms import RoomMaze, room_spans, wall_lines
from gridrush.mapgen.simple import PATTERNS, SimpleMaze
from gridrush.mapgen.spiral import SpiralMaze, ring_cells, ring_sides
from gridrush.mapgen.winding import WindingMaze, fill_density, splice_detour, winding_path
from gridrush.pathfind import find_path, is_contiguous
from gridrush.tiles import OPEN, WALL

SEEDS = range(8)


@pytest.mark.parametrize("variant,level", [("a", 1), ("b", 2)])
def test_simple_maze_parity_walls_spare_the_route(variant, level):
    start, goal = (0, 0), (4, 4)
    route = find_path(create_grid(10), start, goal)
    pattern = PATTERNS[variant]
    for seed in SEEDS:
        g = create_grid(10)
        SimpleMaze(variant).generate(level, g, start, goal, random.Random(seed))
        for x, y in g.cells():
            if (x, y) in route:
                assert g.get(x, y) == OPEN, f"route cell {(x, y)} walled (seed {seed})"
            elif pattern(x, y):
                assert g.get(x, y) == WALL, f"pattern cell {(x, y)} left open (seed {seed})"
        assert find_path(g, start, goal), f"simple maze unsolvable (seed {seed})"


def test_simple_maze_flank_walls_are_random_but_seeded():
    start, goal = (0, 0), (9, 9)
    a = create_grid(10)
    b = create_grid(10)
    SimpleMaze("a").generate(1, a, start, goal, random.Random(5))
    SimpleMaze("a").generate(1, b, start, goal, random.Random(5))
    assert a.buf == b.buf


def test_simple_maze_rejects_unknown_variant():
    with pytest.raises(ValueError):
        SimpleMaze("z")


def test_room_partition_geometry():
    assert wall_lines(10) == [3, 6]
    assert room_spans(10) == [(0, 2), (4, 5), (7, 9)]
    assert wall_lines(12) == [4, 8]
    assert room_spans(12) == [(0, 3), (5, 7), (9, 11)]


def test_room_maze_has_one_door_per_shared_wall():
    n = 10
    lines = wall_lines(n)
    spans = room_spans(n)
    for seed in SEEDS:
        g = create_grid(n)
        RoomMaze().generate(3, g, (0, 0), (9, 9), random.Random(seed))
        # line crossings are solid
        for lx in lines:
            for ly in lines:
                assert g.get(lx, ly) == WALL
        for lx in lines:
            for lo, hi in spans:
                doors = [y for y in range(lo, hi + 1) if g.get(lx, y) == OPEN]
                assert len(doors) == 1, f"x={lx} rows {lo}..{hi}: doors {doors} (seed {seed})"
        for ly in lines:
            for lo, hi in spans:
                doors = [x for x in range(lo, hi + 1) if g.get(x, ly) == OPEN]
                assert len(doors) == 1, f"y={ly} cols {lo}..{hi}: doors {doors} (seed {seed})"
        assert g.get(0, 0) == OPEN and g.get(9, 9) == OPEN


def test_room_maze_obstacles_stay_within_per_room_budget():
    # 2..4 obstacles per room, each at most one extra clustered cell
    start, goal = (0, 0), (9, 9)
    spans = room_spans(10)
    for seed in SEEDS:
        g = create_grid(10)
        RoomMaze().generate(3, g, start, goal, random.Random(seed))
        for xs in spans:
            for ys in spans:
                cells = [
                    (x, y)
                    for x in range(xs[0], xs[1] + 1)
                    for y in range(ys[0], ys[1] + 1)
                ]
                walled = [c for c in cells if g.get(*c) == WALL]
                assert len(walled) <= 8, f"room {xs}x{ys} has {len(walled)} walls (seed {seed})"
                assert start not in walled and goal not in walled
                if start not in cells and goal not in cells:
                    assert walled, f"room {xs}x{ys} got no obstacle (seed {seed})"


def test_spiral_rings_always_have_openings_on_every_side():
    n = 10
    c = n // 2
    for seed in SEEDS:
        g = create_grid(n)
        SpiralMaze().generate(4, g, (0, 0), (9, 9), random.Random(seed))
        for r in range(1, n, 2):
            for side in ring_sides(g, c, c, r):
                assert any(g.get(x, y) == OPEN for x, y in side), f"ring {r} side sealed (seed {seed})"
        assert g.get(0, 0) == OPEN and g.get(9, 9) == OPEN


def test_spiral_corridors_between_rings_stay_open():
    n = 11
    c = n // 2
    g = create_grid(n)
    SpiralMaze().generate(4, g, (0, 0), (10, 10), random.Random(3))
    for r in (0, 2, 4):
        for x, y in ring_cells(g, c, c, r):
            assert g.get(x, y) == OPEN


def test_ring_cells_clip_to_grid():
    g = create_grid(10)
    assert len(ring_cells(g, 5, 5, 1)) == 8
    # radius 5 around (5,5) only survives along x=0 and y=0
    outer = ring_cells(g, 5, 5, 5)
    assert all(x == 0 or y == 0 for x, y in outer)
    assert len(ring_sides(g, 5, 5, 5)) == 2


def test_splice_detour_is_out_and_back():
    g = create_grid(10)
    base = find_path(g, (0, 0), (5, 0))
    spliced = splice_detour(g, base, random.Random(2))
    assert spliced is not None
    assert is_contiguous(spliced)
    added = len(spliced) - len(base)
    assert added % 2 == 0 and 4 <= added <= 8
    # the base route survives in order
    it = iter(spliced)
    assert all(cell in it for cell in base)


def test_splice_detour_needs_an_interior_cell():
    g = create_grid(5)
    assert splice_detour(g, [(0, 0), (1, 0)], random.Random(0)) is None


def test_winding_path_contiguous_and_anchored():
    g = create_grid(10)
    for seed in SEEDS:
        path = winding_path(g, (0, 0), (9, 9), random.Random(seed))
        assert path[0] == (0, 0) and path[-1] == (9, 9)
        assert is_contiguous(path)
        assert len(path) > 19


def test_winding_maze_keeps_buffer_and_route():
    start, goal = (0, 0), (8, 7)
    for seed in SEEDS:
        g = create_grid(10)
        WindingMaze().generate(5, g, start, goal, random.Random(seed))
        for x, y in buffer_zone(g, (start, goal)):
            assert g.get(x, y) == OPEN, f"buffer cell {(x, y)} walled (seed {seed})"
        assert find_path(g, start, goal), f"winding maze unsolvable (seed {seed})"
        assert g.wall_count() > 10


def test_winding_density_scales_with_level():
    assert fill_density(0) == pytest.approx(0.5)
    assert fill_density(10) == pytest.approx(0.8)
    assert WindingMaze().wall_density(30) == 1.0
