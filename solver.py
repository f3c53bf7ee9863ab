"""Backtracking Sudoku solver driven by per-cell obstruction counts."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from puzzle import BOX, SIZE, Puzzle, Solution
from utils import find_given_conflict

log = logging.getLogger(__name__)

CELLS = SIZE * SIZE
_UNITS = ("row", "column", "box")


class ObstructionUnderflowError(RuntimeError):
    """Raised when a counter that is already zero is decremented."""


class Obstruction:
    """Counts, for one cell, how many peers currently hold each digit 1..9."""

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: List[int] = [0] * SIZE

    def increment(self, value: int) -> None:
        self._counts[value - 1] += 1

    def decrement(self, value: int) -> None:
        if self._counts[value - 1] == 0:
            raise ObstructionUnderflowError(f"No peer holds {value}")
        self._counts[value - 1] -= 1

    def count_for(self, value: int) -> int:
        return self._counts[value - 1]

    def is_saturated(self) -> bool:
        # Each digit blocked once in the row, once in the column and once in the box.
        return all(count == 3 for count in self._counts)

    def __repr__(self) -> str:
        return f"Obstruction({self._counts!r})"


def peers(row: int, col: int) -> List[Tuple[int, int]]:
    """The 20 cells sharing a row, column or box with (row, col)."""
    found = []
    for i in range(SIZE):
        if i != col:
            found.append((row, i))
        if i != row:
            found.append((i, col))
    t_row = row % BOX
    t_col = col % BOX
    row0 = row - t_row
    col0 = col - t_col
    for dy in (1, 2):
        for dx in (1, 2):
            found.append((row0 + (t_row + dy) % BOX, col0 + (t_col + dx) % BOX))
    return found


_PEERS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(r * SIZE + c for r, c in peers(index // SIZE, index % SIZE)) for index in range(CELLS)
)


class Cursor:
    """Row-major position over the 81 cells.

    Moving forward past the last cell finishes the walk; moving back before
    the first cell exhausts it.
    """

    def __init__(self) -> None:
        self.index = 0
        self.exhausted = False

    @property
    def row(self) -> int:
        return self.index // SIZE

    @property
    def col(self) -> int:
        return self.index % SIZE

    @property
    def finished(self) -> bool:
        return self.index >= CELLS

    def advance(self) -> None:
        self.index += 1

    def retreat(self) -> bool:
        if self.index == 0:
            self.exhausted = True
            return False
        self.index -= 1
        return True


class _Scratch:
    """Working grid and obstruction records for a single solve."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.values: List[int] = [int(value) for value in puzzle.cells.flat]
        # None marks a given cell.
        self.obstructions: List[Optional[Obstruction]] = [
            None if value else Obstruction() for value in self.values
        ]
        for index, value in enumerate(self.values):
            if value:
                self.obstruct(index)

    def obstruct(self, index: int) -> None:
        value = self.values[index]
        for peer in _PEERS[index]:
            record = self.obstructions[peer]
            if record is not None:
                record.increment(value)

    def release(self, index: int) -> None:
        value = self.values[index]
        for peer in _PEERS[index]:
            record = self.obstructions[peer]
            if record is not None:
                record.decrement(value)

    def clear(self, index: int) -> None:
        self.release(index)
        self.values[index] = 0

    def place_next(self, index: int, record: Obstruction) -> bool:
        """Replace the cell's value with the next unobstructed digit, if any."""
        current = self.values[index]
        if current:
            self.clear(index)
        for candidate in range(current + 1, SIZE + 1):
            if record.count_for(candidate) == 0:
                self.values[index] = candidate
                self.obstruct(index)
                return True
        return False


class SudokuSolver:
    """Obstruction-counting backtracking solver.

    Cells are visited in row-major order and each empty cell takes the
    smallest digit none of its peers holds. When a cell runs out of digits
    the search walks back to the nearest earlier cell that can still move.
    """

    def __init__(self) -> None:
        self.last_status: str = "idle"
        self.placements = 0
        self.backtracks = 0

    def _reset_state(self) -> None:
        self.last_status = "idle"
        self.placements = 0
        self.backtracks = 0

    def solve(self, puzzle: Puzzle) -> Optional[Solution]:
        self._reset_state()
        log.debug("Solving puzzle with %d givens", puzzle.givens())
        conflict = find_given_conflict(puzzle.cells)
        if conflict is not None:
            kind, digit = conflict
            log.debug("Given %d repeats within a %s", digit, _UNITS[kind])
            self.last_status = "inconsistent"
            return None

        scratch = _Scratch(puzzle)
        cursor = Cursor()
        while not cursor.finished:
            record = scratch.obstructions[cursor.index]
            if record is None or scratch.place_next(cursor.index, record):
                if record is not None:
                    self.placements += 1
                cursor.advance()
                continue
            self.backtracks += 1
            if not self._backtrack(scratch, cursor):
                self.last_status = "unsolved"
                log.debug("No solution after %d placements, %d backtracks", self.placements, self.backtracks)
                return None

        self.last_status = "solved"
        log.debug("Solved after %d placements, %d backtracks", self.placements, self.backtracks)
        return Solution.from_values(scratch.values)

    def _backtrack(self, scratch: _Scratch, cursor: Cursor) -> bool:
        """Walk back to a cell that can take another digit; False if none is left."""
        while cursor.retreat():
            record = scratch.obstructions[cursor.index]
            if record is None:
                continue
            if not record.is_saturated():
                return True
            scratch.clear(cursor.index)
        return False


def solve(puzzle: Puzzle) -> Optional[Solution]:
    """Solve ``puzzle`` with a fresh solver; None when it has no solution."""
    return SudokuSolver().solve(puzzle)
