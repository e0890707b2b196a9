# Shared builders for the tests.
from gridrush.grid import Grid, create_grid
from gridrush.tiles import WALL


def grid_from_rows(rows):
    """Build a grid from strings: '#' wall, anything else open. Rows are y, columns x."""
    n = len(rows)
    assert all(len(r) == n for r in rows), "rows must form a square"
    g = create_grid(n)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == "#":
                g.set(x, y, WALL)
    return g


def walls(grid: Grid):
    return {(x, y) for x, y in grid.cells() if grid.get(x, y) == WALL}
