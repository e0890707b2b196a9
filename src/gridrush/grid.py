from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import OutOfBounds
from .tiles import CELL_STATES, OPEN, WALL

XY = Tuple[int, int]

DEFAULT_SIZE = 10


def is_within_bounds(x: int, y: int, n: int) -> bool:
    return 0 <= x < n and 0 <= y < n


@dataclass
class Grid:
    size: int
    buf: List[int]

    @classmethod
    def empty(cls, size: int, fill: int = OPEN) -> "Grid":
        if size < 1:
            raise ValueError("grid size must be at least 1")
        return cls(size=size, buf=[fill] * (size * size))

    def idx(self, x: int, y: int) -> int:
        if not is_within_bounds(x, y, self.size):
            raise OutOfBounds(x, y, self.size)
        return y * self.size + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        if v not in CELL_STATES:
            raise ValueError(f"unknown cell state {v!r}")
        self.buf[self.idx(x, y)] = v

    def in_bounds(self, x: int, y: int) -> bool:
        return is_within_bounds(x, y, self.size)

    def is_open(self, x: int, y: int) -> bool:
        return self.get(x, y) == OPEN

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y) == WALL

    def cells(self) -> Iterator[XY]:
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def wall_count(self) -> int:
        return sum(1 for v in self.buf if v == WALL)

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """Read-only row-major view handed to renderers."""
        n = self.size
        return tuple(tuple(self.buf[y * n:(y + 1) * n]) for y in range(n))

    def as_matrix(self) -> List[List[int]]:
        return [list(row) for row in self.snapshot()]


def create_grid(n: int = DEFAULT_SIZE) -> Grid:
    """Return an ``n`` x ``n`` grid with every cell open."""
    return Grid.empty(n, OPEN)


def get_cell(grid: Grid, x: int, y: int) -> int:
    return grid.get(x, y)


def set_cell(grid: Grid, x: int, y: int, state: int) -> None:
    grid.set(x, y, state)
