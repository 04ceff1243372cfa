from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from ..core.model import GRID_SIZE, UNASSIGNED, Grid, InvalidGridError, check_grid, copy_grid

DIGIT_CHARS = "0123456789"


@dataclass
class Puzzle:
    grid: Grid
    expected: Optional[Grid] = None
    name: str = ""


def _parse_row(index: int, row: Any) -> List[int]:
    if isinstance(row, str):
        cells = "".join(row.split())
        if len(cells) != GRID_SIZE:
            raise InvalidGridError(f"row {index}: expected {GRID_SIZE} characters, got {cells!r}")
        values = []
        for ch in cells:
            if ch == ".":
                values.append(UNASSIGNED)
            elif ch in DIGIT_CHARS:
                values.append(int(ch))
            else:
                raise InvalidGridError(f"row {index}: unexpected character {ch!r}")
        return values
    if isinstance(row, (list, tuple)):
        return list(row)
    raise InvalidGridError(f"row {index}: expected a list or string, got {type(row).__name__}")


def parse_rows(rows: Any) -> Grid:
    """Convert YAML rows (int lists or strings like ``"3.65.84.."``) into a grid."""
    if not isinstance(rows, (list, tuple)):
        raise InvalidGridError(f"grid must be a list of rows, got {type(rows).__name__}")
    grid = [_parse_row(i, row) for i, row in enumerate(rows)]
    check_grid(grid)
    return grid


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    # bytes: undecodable input surfaces as yaml.reader.ReaderError
    with open(path, "rb") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "grid" not in data:
        raise InvalidGridError(f"{path}: missing 'grid' key")

    grid = parse_rows(data["grid"])
    expected = data.get("expected")
    return Puzzle(
        grid=grid,
        expected=parse_rows(expected) if expected is not None else None,
        name=str(data.get("name", Path(path).stem)),
    )


# The puzzle solved when no file is given, with its known answer.
_DEFAULT_GRID: Sequence[Sequence[int]] = (
    (3, 0, 6, 5, 0, 8, 4, 0, 0),
    (5, 2, 0, 0, 0, 0, 0, 0, 0),
    (0, 8, 7, 0, 0, 0, 0, 3, 1),
    (0, 0, 3, 0, 1, 0, 0, 8, 0),
    (9, 0, 0, 8, 6, 3, 0, 0, 5),
    (0, 5, 0, 0, 9, 0, 6, 0, 0),
    (1, 3, 0, 0, 0, 0, 2, 5, 0),
    (0, 0, 0, 0, 0, 0, 0, 7, 4),
    (0, 0, 5, 2, 0, 6, 3, 0, 0),
)

_DEFAULT_SOLUTION: Sequence[Sequence[int]] = (
    (3, 1, 6, 5, 7, 8, 4, 9, 2),
    (5, 2, 9, 1, 3, 4, 7, 6, 8),
    (4, 8, 7, 6, 2, 9, 5, 3, 1),
    (2, 6, 3, 4, 1, 5, 9, 8, 7),
    (9, 7, 4, 8, 6, 3, 1, 2, 5),
    (8, 5, 1, 7, 9, 2, 6, 4, 3),
    (1, 3, 8, 9, 4, 7, 2, 5, 6),
    (6, 9, 2, 3, 5, 1, 8, 7, 4),
    (7, 4, 5, 2, 8, 6, 3, 1, 9),
)


def default_puzzle() -> Puzzle:
    """A fresh copy of the built-in puzzle; callers may mutate its grid."""
    return Puzzle(
        grid=copy_grid(_DEFAULT_GRID),
        expected=copy_grid(_DEFAULT_SOLUTION),
        name="default",
    )
