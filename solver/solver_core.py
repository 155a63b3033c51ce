"""Core Sudoku grid: index math, peers, unit iterators, and the mutable SudokuGrid used by the backtracking search."""

# solver_core.py
# Grid representation for the backtracking solver:
# - box / unit / peer index math (0-based rows and columns)
# - SudokuGrid: 81 cells, legality queries and in-place mutation
# Cells hold 1..9, or 0 for blank.
from __future__ import annotations

from types_sudoku import BOX, DIGITS, EMPTY, SIZE, Cell, Grid


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def cell_key(r: int, c: int) -> str:
    """Human-facing 1-based label, e.g. (0, 0) -> 'r1c1'."""
    return f"r{r + 1}c{c + 1}"


def box_index(r: int, c: int) -> int:
    return (r // BOX) * BOX + (c // BOX)


def box_origin(b: int) -> Cell:
    return (b // BOX) * BOX, (b % BOX) * BOX


def unit_cells_row(r: int) -> list[Cell]:
    return [(r, c) for c in range(SIZE)]


def unit_cells_col(c: int) -> list[Cell]:
    return [(r, c) for r in range(SIZE)]


def unit_cells_box(b: int) -> list[Cell]:
    r0, c0 = box_origin(b)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


def all_units() -> list[tuple[str, list[Cell]]]:
    """Every row, column and box, labelled 'r1'..'r9', 'c1'..'c9', 'b1'..'b9'."""
    units = [(f"r{i + 1}", unit_cells_row(i)) for i in range(SIZE)]
    units += [(f"c{i + 1}", unit_cells_col(i)) for i in range(SIZE)]
    units += [(f"b{i + 1}", unit_cells_box(i)) for i in range(SIZE)]
    return units


def peers(r: int, c: int) -> set[Cell]:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = set(unit_cells_row(r)) | set(unit_cells_col(c)) | set(unit_cells_box(box_index(r, c)))
    ps.discard((r, c))
    return ps


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


class SudokuGrid:
    """A 9x9 board of digits, mutated in place by the solver.

    Rows and columns are 0-based. `set` performs no legality check; callers
    ask `can_place` first.
    """

    __slots__ = ("_cells",)

    def __init__(self, rows: Grid | None = None) -> None:
        if rows is None:
            self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]
            return
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("grid must be 9 rows of 9 cells")
        for row in rows:
            for v in row:
                if isinstance(v, bool) or not isinstance(v, int) or not (EMPTY <= v <= SIZE):
                    raise ValueError(f"cell value must be an int in 0..9, got {v!r}")
        self._cells = clone_grid(rows)

    @classmethod
    def from_rows(cls, rows: Grid) -> SudokuGrid:
        return cls(rows)

    def to_rows(self) -> Grid:
        return clone_grid(self._cells)

    def copy(self) -> SudokuGrid:
        return SudokuGrid(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return "SudokuGrid(%r)" % ("".join(str(v) for row in self._cells for v in row),)

    def get(self, row: int, col: int) -> int:
        if not in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) out of range")
        return self._cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        if not in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) out of range")
        self._cells[row][col] = value

    def clear(self, row: int, col: int) -> None:
        self.set(row, col, EMPTY)

    def can_place(self, row: int, col: int, digit: int) -> bool:
        """True iff `digit` does not already appear among the cell's row, column or box peers."""
        if not in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) out of range")
        cells = self._cells
        for j in range(SIZE):
            if j != col and cells[row][j] == digit:
                return False
        for i in range(SIZE):
            if i != row and cells[i][col] == digit:
                return False
        r0 = (row // BOX) * BOX
        c0 = (col // BOX) * BOX
        for i in range(r0, r0 + BOX):
            for j in range(c0, c0 + BOX):
                if (i, j) != (row, col) and cells[i][j] == digit:
                    return False
        return True

    def is_complete(self) -> bool:
        return all(v != EMPTY for row in self._cells for v in row)

    def find_next_empty(self) -> Cell | None:
        # Row-major, first hit wins.
        for r in range(SIZE):
            for c in range(SIZE):
                if self._cells[r][c] == EMPTY:
                    return r, c
        return None

    def givens(self) -> dict[Cell, int]:
        return {
            (r, c): self._cells[r][c]
            for r in range(SIZE)
            for c in range(SIZE)
            if self._cells[r][c] != EMPTY
        }

    def unit_values(self, cells: list[Cell]) -> list[int]:
        return [self._cells[r][c] for r, c in cells]

    def is_legal(self) -> bool:
        """No digit appears twice among the non-empty cells of any row, column or box."""
        for _, cells in all_units():
            vals = [v for v in self.unit_values(cells) if v != EMPTY]
            if len(vals) != len(set(vals)):
                return False
        return True

    def is_solved(self) -> bool:
        if not self.is_complete():
            return False
        return all(sorted(self.unit_values(cells)) == list(DIGITS) for _, cells in all_units())
