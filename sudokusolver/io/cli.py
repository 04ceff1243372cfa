"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from ..core.csp import solve
from ..core.model import InvalidGridError
from . import parser
from .output import NO_SOLUTION_MESSAGE, print_grid

log = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Backtracking Sudoku solver")
    ap.add_argument("puzzle", nargs="?", type=Path, default=None,
                    help="Path to puzzle YAML (default: built-in puzzle)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        puz = parser.load_puzzle(args.puzzle) if args.puzzle else parser.default_puzzle()
        log.info("Solving puzzle %r", puz.name)
        solved = solve(puz.grid)
    except (InvalidGridError, OSError, yaml.YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if not solved:
        print(NO_SOLUTION_MESSAGE)
        return EXIT_UNSOLVABLE

    if puz.expected is not None and puz.grid != puz.expected:
        print(f"error: solution for {puz.name!r} does not match the expected grid", file=sys.stderr)
        return EXIT_ERROR

    print_grid(puz.grid)
    return EXIT_SOLVED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
