from pathlib import Path

import pytest

from sudokusolver.core.model import InvalidGridError, check_grid
from sudokusolver.io.output import format_grid
from sudokusolver.io.parser import default_puzzle, load_puzzle, parse_rows

PUZZLES = Path(__file__).resolve().parents[1] / "puzzles"


def test_load_puzzle1(puzzle):
    loaded = load_puzzle(PUZZLES / "puzzle1.yaml")
    assert loaded.name == "puzzle1"
    assert loaded.grid == puzzle.grid
    assert loaded.expected == puzzle.expected


def test_name_defaults_to_file_stem(tmp_path):
    path = tmp_path / "mine.yaml"
    path.write_text("grid:\n" + "".join('  - "........."\n' for _ in range(9)), encoding="utf-8")
    loaded = load_puzzle(path)
    assert loaded.name == "mine"
    assert loaded.expected is None
    assert loaded.grid == [[0] * 9 for _ in range(9)]


def test_parse_rows_mixed():
    rows = ["1 2 3 4 5 6 7 8 9"] + [[0] * 9] * 8
    grid = parse_rows(rows)
    assert grid[0] == list(range(1, 10))
    assert grid[1] == [0] * 9


@pytest.mark.parametrize(
    "rows",
    [
        "123",
        ["123456789"] * 8,
        ["12345678x"] + ["........."] * 8,
        ["1234567890"] + ["........."] * 8,
        [123456789] + ["........."] * 8,
        [[0] * 9] * 8 + [[0] * 8 + [10]],
    ],
)
def test_parse_rows_rejects_malformed(rows):
    with pytest.raises(InvalidGridError):
        parse_rows(rows)


def test_missing_grid_key(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("name: nothing\n", encoding="utf-8")
    with pytest.raises(InvalidGridError):
        load_puzzle(path)


def test_check_grid_rejects_non_integers():
    grid = [[0] * 9 for _ in range(9)]
    grid[4][4] = True
    with pytest.raises(InvalidGridError):
        check_grid(grid)


def test_default_puzzle_is_a_fresh_copy():
    a = default_puzzle()
    a.grid[0][1] = 1
    assert default_puzzle().grid[0][1] == 0


def test_format_grid(puzzle):
    lines = format_grid(puzzle.expected).splitlines()
    assert len(lines) == 9
    assert lines[0] == "3 1 6 5 7 8 4 9 2"
    assert lines[8] == "7 4 5 2 8 6 3 1 9"


def test_arabic_indic_digit_is_not_a_digit():
    with pytest.raises(InvalidGridError):
        parse_rows(["٣........"] + ["........."] * 8)
