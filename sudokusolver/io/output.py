"""Console rendering of grids."""

from __future__ import annotations

import sys
from typing import IO, Optional

from ..core.model import Grid

NO_SOLUTION_MESSAGE = "No solution exists"


def format_grid(grid: Grid) -> str:
    """Nine lines of nine space-separated digits."""
    return "\n".join(" ".join(str(v) for v in row) for row in grid)


def print_grid(grid: Grid, file: Optional[IO[str]] = None) -> None:
    print(format_grid(grid), file=file if file is not None else sys.stdout)
