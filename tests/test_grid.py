import pytest

from gridrush.errors import OutOfBounds
from gridrush.grid import create_grid, get_cell, is_within_bounds, set_cell
from gridrush.tiles import OPEN, WALL, is_open, is_wall


def test_create_grid_all_open():
    g = create_grid(10)
    assert g.size == 10
    assert len(g.buf) == 100
    assert all(v == OPEN for v in g.buf)
    assert g.wall_count() == 0


def test_create_grid_rejects_empty():
    with pytest.raises(ValueError):
        create_grid(0)


def test_set_and_get_roundtrip_row_major():
    g = create_grid(4)
    set_cell(g, 3, 1, WALL)
    assert get_cell(g, 3, 1) == WALL
    assert g.buf[1 * 4 + 3] == WALL
    assert g.snapshot()[1][3] == WALL
    assert g.wall_count() == 1


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 4), (10, 10)])
def test_out_of_bounds_is_reported_not_clamped(x, y):
    g = create_grid(4)
    with pytest.raises(OutOfBounds) as info:
        g.get(x, y)
    assert (info.value.x, info.value.y, info.value.size) == (x, y, 4)
    with pytest.raises(OutOfBounds):
        g.set(x, y, WALL)
    # OutOfBounds is still an IndexError for generic callers
    assert isinstance(info.value, IndexError)


def test_set_rejects_unknown_state():
    g = create_grid(3)
    with pytest.raises(ValueError):
        g.set(0, 0, 7)


def test_is_within_bounds():
    assert is_within_bounds(0, 0, 3)
    assert is_within_bounds(2, 2, 3)
    assert not is_within_bounds(3, 0, 3)
    assert not is_within_bounds(0, -1, 3)


def test_snapshot_is_read_only_shape():
    g = create_grid(3)
    g.set(2, 0, WALL)
    snap = g.snapshot()
    assert snap == ((0, 0, 1), (0, 0, 0), (0, 0, 0))
    assert isinstance(snap, tuple) and isinstance(snap[0], tuple)
    assert g.as_matrix() == [[0, 0, 1], [0, 0, 0], [0, 0, 0]]


def test_tile_predicates():
    assert is_open(OPEN) and not is_open(WALL)
    assert is_wall(WALL) and not is_wall(OPEN)
