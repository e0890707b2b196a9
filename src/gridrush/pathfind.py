# src/gridrush/pathfind.py
# Best-first search with a Manhattan heuristic over the 4-connected grid.
#
# The open set is a plain list scanned linearly; the first node holding the
# minimal f wins, so ties go to the earliest-inserted candidate. Generators
# rely on this for reproducible carving, so keep it a list rather than a heap.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

from .errors import OutOfBounds
from .grid import XY, Grid
from .tiles import OPEN

# Expansion order: Right, Left, Down, Up
NEIGHBOR_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class PathNode:
    x: int
    y: int
    g: int
    h: int
    parent: Optional["PathNode"] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def pos(self) -> XY:
        return (self.x, self.y)


def _reconstruct(node: PathNode) -> List[XY]:
    out: List[XY] = []
    cur: Optional[PathNode] = node
    while cur is not None:
        out.append(cur.pos)
        cur = cur.parent
    out.reverse()
    return out


def find_path(grid: Grid, start: XY, goal: XY) -> List[XY]:
    """
    Return the cells from ``start`` to ``goal`` inclusive, or ``[]`` if the
    goal cannot be reached. Walls are never entered and the grid is not
    touched. Raises OutOfBounds if either endpoint lies off the grid.
    """
    for x, y in (start, goal):
        if not grid.in_bounds(x, y):
            raise OutOfBounds(x, y, grid.size)
    if grid.get(*start) != OPEN or grid.get(*goal) != OPEN:
        return []

    open_list: List[PathNode] = [PathNode(start[0], start[1], 0, manhattan(start, goal))]
    open_index: Dict[XY, PathNode] = {start: open_list[0]}
    closed: Set[XY] = set()

    while open_list:
        best = 0
        for i in range(1, len(open_list)):
            if open_list[i].f < open_list[best].f:
                best = i
        current = open_list.pop(best)
        del open_index[current.pos]

        if current.pos == goal:
            return _reconstruct(current)

        closed.add(current.pos)

        for dx, dy in NEIGHBOR_STEPS:
            nx, ny = current.x + dx, current.y + dy
            if not grid.in_bounds(nx, ny) or (nx, ny) in closed:
                continue
            if grid.get(nx, ny) != OPEN:
                continue
            g = current.g + 1
            known = open_index.get((nx, ny))
            if known is not None:
                if g < known.g:
                    known.g = g
                    known.parent = current
                continue
            node = PathNode(nx, ny, g, manhattan((nx, ny), goal), current)
            open_list.append(node)
            open_index[node.pos] = node

    return []


def is_contiguous(path: Sequence[XY]) -> bool:
    """True when every consecutive pair is exactly one orthogonal step apart."""
    return all(manhattan(a, b) == 1 for a, b in zip(path, path[1:]))
