# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""(row, col), 0-based."""

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = range(1, SIZE + 1)


class SanityIssue(TypedDict, total=False):
    """One problem found by `sanity_check`."""

    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # for duplicates, e.g. 'r4', 'c7', 'b2'
    digits: list[int]  # duplicated digits within the unit
    cells: list[str]  # offending cells (e.g., 'r4c7')
    cell: str  # for overwritten givens
    given: int
    found: int
