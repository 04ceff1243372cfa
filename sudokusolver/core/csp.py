"""Backtracking constraint solver."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .constraints import is_consistent, is_safe
from .locator import unassigned_locations
from .model import DIGITS, UNASSIGNED, Grid, check_grid

log = logging.getLogger(__name__)


@dataclass
class SolveStats:
    """Search effort for a single solve call."""
    assignments: int = 0
    backtracks: int = 0


def solve_with_stats(grid: Grid, validate: bool = True) -> Tuple[bool, SolveStats]:
    """Fill ``grid`` in place and report whether a solution was found.

    Empty cells are visited in row-major order and digits are tried in
    ascending order, so the first solution in that order is the one
    returned. On failure every tentative assignment has been undone and
    ``grid`` holds its original values.

    With ``validate`` set, a malformed grid raises ``InvalidGridError`` and
    a seed that already breaks a row, column or box returns ``False``
    without searching.
    """
    stats = SolveStats()
    if validate:
        check_grid(grid)
        if not is_consistent(grid):
            log.debug("seed grid violates a constraint, not searching")
            return False, stats

    empties = unassigned_locations(grid)
    log.debug("solving grid with %d unassigned cells", len(empties))

    def backtrack(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for num in DIGITS:
            if not is_safe(grid, row, col, num):
                continue
            grid[row][col] = num
            stats.assignments += 1
            if backtrack(index + 1):
                return True
            grid[row][col] = UNASSIGNED
            stats.backtracks += 1
        return False

    solved = backtrack(0)
    log.debug(
        "%s after %d assignments, %d backtracks",
        "solved" if solved else "no solution",
        stats.assignments,
        stats.backtracks,
    )
    return solved, stats


def solve(grid: Grid, validate: bool = True) -> bool:
    solved, _ = solve_with_stats(grid, validate=validate)
    return solved
