"""Command-line Sudoku solver: reads a puzzle from a file or stdin and prints the solution."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from puzzle import Puzzle, PuzzleError
from solver import SudokuSolver

__version__ = "0.1.0"

PROG = "sudoku"
STDIN_NAME = "-"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

log = logging.getLogger(__name__)


def _fail(message: str) -> int:
    print(f"{PROG}: {message}", file=sys.stderr)
    return 1


def read_puzzle_text(infile: str) -> str:
    if infile == STDIN_NAME:
        return sys.stdin.read()
    with open(infile, encoding="utf-8") as handle:
        return handle.read()


def run(infile: str = STDIN_NAME, pretty: bool = False) -> int:
    try:
        text = read_puzzle_text(infile)
    except OSError as exc:
        return _fail(f"Error opening input file: {exc}")
    except UnicodeDecodeError as exc:
        return _fail(f"Error reading input: {exc}")

    try:
        puzzle = Puzzle.parse(text)
    except PuzzleError as exc:
        return _fail(f"Invalid input: {exc}")

    log.info("Read puzzle from %s", "stdin" if infile == STDIN_NAME else infile)
    solver = SudokuSolver()
    solution = solver.solve(puzzle)
    log.info("Solver finished with status %r", solver.last_status)
    if solution is None:
        print("No solution", file=sys.stderr)
        return 1
    print(solution.pretty() if pretty else str(solution))
    return 0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROG, description="Solve Sudoku puzzles")
    parser.add_argument(
        "-P",
        "--pretty",
        action="store_true",
        help="Output the solution with borders and spacing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log solver progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "infile",
        nargs="?",
        default=STDIN_NAME,
        help="File containing the Sudoku puzzle to solve (default: read from stdin)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    return run(args.infile, pretty=args.pretty)


if __name__ == "__main__":
    sys.exit(main())
