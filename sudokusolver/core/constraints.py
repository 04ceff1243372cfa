"""Placement constraints and whole-grid checks."""

from __future__ import annotations

from typing import Callable, Iterable, List

from .model import BOX_SIZE, DIGITS, GRID_SIZE, UNASSIGNED, Grid, Location

# (grid, row, col, num) -> True when placing num at (row, col) is allowed
Constraint = Callable[[Grid, int, int, int], bool]

CONSTRAINTS: List[Constraint] = []


def register_constraint(fn: Constraint) -> Constraint:
    CONSTRAINTS.append(fn)
    return fn


def used_in_row(grid: Grid, row: int, num: int) -> bool:
    return any(grid[row][col] == num for col in range(GRID_SIZE))


def used_in_col(grid: Grid, col: int, num: int) -> bool:
    return any(grid[row][col] == num for row in range(GRID_SIZE))


def used_in_box(grid: Grid, box_start_row: int, box_start_col: int, num: int) -> bool:
    for row in range(box_start_row, box_start_row + BOX_SIZE):
        for col in range(box_start_col, box_start_col + BOX_SIZE):
            if grid[row][col] == num:
                return True
    return False


def box_origin(row: int, col: int) -> Location:
    """Top-left cell of the 3x3 box containing (row, col)."""
    return row - row % BOX_SIZE, col - col % BOX_SIZE


@register_constraint
def row_free(grid: Grid, row: int, col: int, num: int) -> bool:
    return not used_in_row(grid, row, num)


@register_constraint
def col_free(grid: Grid, row: int, col: int, num: int) -> bool:
    return not used_in_col(grid, col, num)


@register_constraint
def box_free(grid: Grid, row: int, col: int, num: int) -> bool:
    return not used_in_box(grid, *box_origin(row, col), num)


@register_constraint
def cell_unassigned(grid: Grid, row: int, col: int, num: int) -> bool:
    return grid[row][col] == UNASSIGNED


def is_safe(grid: Grid, row: int, col: int, num: int) -> bool:
    """Whether ``num`` may be placed at (row, col) under every registered constraint."""
    return all(c(grid, row, col, num) for c in CONSTRAINTS)


def units(grid: Grid) -> Iterable[List[int]]:
    """Yield the values of every row, column and box."""
    for i in range(GRID_SIZE):
        yield list(grid[i])
        yield [grid[r][i] for r in range(GRID_SIZE)]
    for box_row in range(0, GRID_SIZE, BOX_SIZE):
        for box_col in range(0, GRID_SIZE, BOX_SIZE):
            yield [
                grid[r][c]
                for r in range(box_row, box_row + BOX_SIZE)
                for c in range(box_col, box_col + BOX_SIZE)
            ]


def is_consistent(grid: Grid) -> bool:
    """True if no row, column or box repeats a non-zero digit."""
    for unit in units(grid):
        filled = [v for v in unit if v != UNASSIGNED]
        if len(filled) != len(set(filled)):
            return False
    return True


def is_complete(grid: Grid) -> bool:
    return all(v != UNASSIGNED for row in grid for v in row)


def is_solved(grid: Grid) -> bool:
    return all(sorted(unit) == list(DIGITS) for unit in units(grid))
