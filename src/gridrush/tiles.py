# Canonical cell states. The grid stores plain ints so snapshots stay cheap to copy.

OPEN = 0
WALL = 1

CELL_STATES = (OPEN, WALL)


def is_open(cell: int) -> bool:
    return cell == OPEN


def is_wall(cell: int) -> bool:
    return cell == WALL
