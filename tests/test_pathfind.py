import pytest

from gridrush.errors import OutOfBounds
from gridrush.grid import create_grid
from gridrush.pathfind import find_path, is_contiguous, manhattan
from gridrush.tiles import WALL

from helpers import grid_from_rows


def test_open_grid_path_is_manhattan_optimal():
    g = create_grid(10)
    for start, goal in [((0, 0), (4, 4)), ((0, 0), (9, 9)), ((7, 2), (1, 8)), ((3, 3), (3, 9))]:
        path = find_path(g, start, goal)
        assert len(path) == manhattan(start, goal) + 1, f"non-optimal path {start}->{goal}"
        assert path[0] == start and path[-1] == goal
        assert is_contiguous(path)


def test_start_equals_goal():
    g = create_grid(5)
    assert find_path(g, (2, 2), (2, 2)) == [(2, 2)]


def test_ties_go_to_first_inserted_candidate():
    # Expansion order is right, left, down, up and the first minimal f wins,
    # so on an open board the route runs along the top row first.
    g = create_grid(3)
    assert find_path(g, (0, 0), (2, 2)) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_enclosed_goal_returns_empty():
    g = grid_from_rows([
        ".....",
        ".###.",
        ".#.#.",
        ".###.",
        ".....",
    ])
    assert find_path(g, (0, 0), (2, 2)) == []


def test_routes_around_walls_and_never_enters_them():
    g = grid_from_rows([
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        ".....",
    ])
    path = find_path(g, (0, 0), (4, 0))
    assert len(path) == 13
    assert (2, 4) in path
    assert all(g.get(x, y) != WALL for x, y in path)
    assert is_contiguous(path)


def test_wall_endpoints_yield_empty_path():
    g = create_grid(4)
    g.set(3, 3, WALL)
    assert find_path(g, (0, 0), (3, 3)) == []
    g.set(0, 0, WALL)
    assert find_path(g, (0, 0), (1, 1)) == []


def test_out_of_bounds_endpoint_raises():
    g = create_grid(4)
    with pytest.raises(OutOfBounds):
        find_path(g, (0, 0), (4, 0))
    with pytest.raises(OutOfBounds):
        find_path(g, (-1, 0), (1, 0))


def test_search_is_pure_and_deterministic():
    g = grid_from_rows([
        "......",
        ".##.#.",
        "...#..",
        "#.#...",
        "......",
        ".#.##.",
    ])
    before = list(g.buf)
    first = find_path(g, (0, 0), (5, 5))
    second = find_path(g, (0, 0), (5, 5))
    assert first == second
    assert first, "expected a route"
    assert g.buf == before, "find_path must not mutate the grid"


def test_is_contiguous():
    assert is_contiguous([(0, 0), (1, 0), (1, 1)])
    assert not is_contiguous([(0, 0), (1, 1)])
    assert is_contiguous([])
