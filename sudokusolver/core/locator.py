"""Locate unassigned cells in row-major order."""

from __future__ import annotations

from typing import List, Optional

from .model import GRID_SIZE, UNASSIGNED, Grid, Location


def find_unassigned_location(grid: Grid) -> Optional[Location]:
    """Return the first empty cell scanning rows top to bottom, or ``None``."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if grid[row][col] == UNASSIGNED:
                return row, col
    return None


def unassigned_locations(grid: Grid) -> List[Location]:
    return [
        (row, col)
        for row in range(GRID_SIZE)
        for col in range(GRID_SIZE)
        if grid[row][col] == UNASSIGNED
    ]
