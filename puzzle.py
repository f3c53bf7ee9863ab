"""Puzzle and solution grids, plus construction from rows or text."""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from utils import render_compact, render_pretty

SIZE = 9
BOX = 3
MAX_VALUE = 9
DIGITS = "0123456789"

Rows = List[List[int]]


class PuzzleError(ValueError):
    """Base class for grids that cannot be turned into a puzzle."""


class CellValueTooLargeError(PuzzleError):
    def __init__(self, value: int) -> None:
        super().__init__(f"Cell value too large: {value}")
        self.value = value


class BadRowSizeError(PuzzleError):
    def __init__(self, length: int) -> None:
        super().__init__(f"Row has {length} cells, expected {SIZE}")
        self.length = length


class BadGridSizeError(PuzzleError):
    def __init__(self, rows: int) -> None:
        super().__init__(f"Grid has {rows} rows, expected {SIZE}")
        self.rows = rows


def _freeze(cells: np.ndarray) -> np.ndarray:
    frozen = np.array(cells, dtype=np.uint8).reshape(SIZE, SIZE)
    frozen.setflags(write=False)
    return frozen


def _check_value(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise PuzzleError(f"Cell value is not an integer: {value!r}")
    value = int(value)
    if value > MAX_VALUE:
        raise CellValueTooLargeError(value)
    if value < 0:
        raise PuzzleError(f"Cell value is negative: {value}")
    return value


def _validate_rows(rows: Iterable[Sequence[int]]) -> np.ndarray:
    checked: Rows = []
    for row in rows:
        values = list(row)
        if len(values) != SIZE:
            raise BadRowSizeError(len(values))
        checked.append([_check_value(value) for value in values])
    if len(checked) != SIZE:
        raise BadGridSizeError(len(checked))
    return _freeze(np.array(checked))


@dataclass(frozen=True, eq=False)
class _Grid:
    cells: np.ndarray

    def __getitem__(self, coord: Tuple[int, int]) -> int:
        row, col = coord
        return int(self.cells[row, col])

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.cells.tobytes()))

    def __str__(self) -> str:
        return render_compact(self.cells)

    def rows(self) -> Rows:
        return [[int(value) for value in row] for row in self.cells]

    def pretty(self) -> str:
        """Bordered rendering; unfilled cells are drawn as blanks."""
        return render_pretty(self.cells)


@dataclass(frozen=True, eq=False)
class Puzzle(_Grid):
    """An immutable 9x9 input grid (0 = unfilled).

    A puzzle only promises that its shape is right and every value lies in
    0..9; whether it can be completed is decided by the solver.
    """

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _validate_rows(self.cells))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> Puzzle:
        return cls(rows)  # type: ignore[arg-type]

    @classmethod
    def parse(cls, text: str) -> Puzzle:
        """Read a puzzle from text.

        Digits are cell values, any other visible character is an unfilled
        cell. Horizontal whitespace and blank lines are ignored.
        """
        rows: Rows = []
        for line in text.splitlines():
            symbols = [ch for ch in line if not ch.isspace()]
            if not symbols:
                continue
            rows.append([DIGITS.index(ch) if ch in DIGITS else 0 for ch in symbols])
        return cls.from_rows(rows)

    def givens(self) -> int:
        return int(np.count_nonzero(self.cells))


class Solution(_Grid):
    """A completed grid returned by the solver."""

    @classmethod
    def from_values(cls, values: Sequence[int]) -> Solution:
        """Wrap 81 row-major values produced by a finished search."""
        return cls(_freeze(np.asarray(values)))
