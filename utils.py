"""Utility helpers for rendering grids and checking them against the Sudoku rules."""
from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

_BORDER = "+-----+-----+-----+"
_DIGITS = np.arange(1, 10)


def _boxes(grid: np.ndarray) -> np.ndarray:
    """Return the nine 3x3 boxes as rows of a (9, 9) array, box-major."""
    return grid.reshape(3, 3, 3, 3).swapaxes(1, 2).reshape(9, 9)


def render_compact(grid: np.ndarray) -> str:
    """Nine lines of nine digits, unfilled cells as 0."""
    return "\n".join("".join(str(int(value)) for value in row) for row in grid)


def render_pretty(grid: np.ndarray) -> str:
    """Draw the grid inside a box frame with a divider every three rows and columns."""
    lines: List[str] = [_BORDER]
    for row_idx, row in enumerate(grid):
        bands = []
        for start in range(0, 9, 3):
            bands.append(" ".join(str(int(value)) if value else " " for value in row[start : start + 3]))
        lines.append("|" + "|".join(bands) + "|")
        if row_idx % 3 == 2:
            lines.append(_BORDER)
    return "\n".join(lines)


def is_valid_solution(grid: np.ndarray) -> bool:
    """True when every row, column and box holds each of 1..9 exactly once."""
    grid = np.asarray(grid)
    if grid.shape != (9, 9):
        return False
    for units in (grid, grid.T, _boxes(grid)):
        if not np.array_equal(np.sort(units, axis=1), np.broadcast_to(_DIGITS, (9, 9))):
            return False
    return True


def find_given_conflict(grid: np.ndarray) -> Optional[Tuple[int, int]]:
    """Return the first (unit kind, digit) pair repeated among filled cells, or None.

    Unit kind is 0 for rows, 1 for columns and 2 for boxes.
    """
    grid = np.asarray(grid)
    for kind, units in enumerate((grid, grid.T, _boxes(grid))):
        for unit in units:
            filled = unit[unit != 0]
            values, counts = np.unique(filled, return_counts=True)
            repeated = values[counts > 1]
            if repeated.size:
                return kind, int(repeated[0])
    return None
