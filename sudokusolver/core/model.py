from __future__ import annotations

from typing import List, Sequence, Tuple

UNASSIGNED = 0
GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, GRID_SIZE + 1)

Grid = List[List[int]]
Location = Tuple[int, int]


class InvalidGridError(ValueError):
    """Raised when a grid is not a 9x9 matrix of integers in 0..9."""


def check_grid(grid: Sequence[Sequence[int]]) -> None:
    """Raise ``InvalidGridError`` unless ``grid`` has the right shape and values."""
    if len(grid) != GRID_SIZE:
        raise InvalidGridError(f"expected {GRID_SIZE} rows, got {len(grid)}")
    for r, row in enumerate(grid):
        if len(row) != GRID_SIZE:
            raise InvalidGridError(f"row {r}: expected {GRID_SIZE} cells, got {len(row)}")
        for c, value in enumerate(row):
            # bool is an int subclass, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidGridError(f"cell ({r}, {c}): {value!r} is not an integer")
            if not UNASSIGNED <= value <= GRID_SIZE:
                raise InvalidGridError(f"cell ({r}, {c}): {value} out of range 0..{GRID_SIZE}")


def empty_grid() -> Grid:
    return [[UNASSIGNED] * GRID_SIZE for _ in range(GRID_SIZE)]


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]
