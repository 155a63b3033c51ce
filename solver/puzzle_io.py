"""Text layout for puzzles: parse 9 lines of 9 cells into a SudokuGrid, and render a grid plainly or with borders."""

# puzzle_io.py
# Input: blank lines and spaces/tabs are ignored; '1'..'9' are givens,
# '0' or any other character is a blank.
from __future__ import annotations

from types_sudoku import BOX, EMPTY, SIZE

from .solver_core import SudokuGrid

BORDER = "+" + "+".join(["-" * (2 * BOX - 1)] * BOX) + "+"  # +-----+-----+-----+


class PuzzleFormatError(ValueError):
    pass


def parse_cell(ch: str) -> int:
    if "1" <= ch <= "9":
        return int(ch)
    return EMPTY


def parse_puzzle(text: str) -> SudokuGrid:
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        cells = "".join(line.split())
        if not cells:
            continue
        if len(cells) != SIZE:
            raise PuzzleFormatError(f"line {lineno}: expected {SIZE} cells, found {len(cells)}")
        rows.append([parse_cell(ch) for ch in cells])
    if len(rows) != SIZE:
        raise PuzzleFormatError(f"expected {SIZE} rows, found {len(rows)}")
    return SudokuGrid(rows)


def format_grid(grid: SudokuGrid, pretty: bool = False) -> str:
    """Plain: nine lines of nine digits (blanks as '0').
    Pretty: boxed 3x3 bands, single spaces between values, blanks as ' '.
    """
    rows = grid.to_rows()
    if not pretty:
        return "".join("".join(str(v) for v in row) + "\n" for row in rows)

    out = [BORDER]
    for r, row in enumerate(rows):
        bands = []
        for b in range(0, SIZE, BOX):
            bands.append(" ".join(str(v) if v != EMPTY else " " for v in row[b:b + BOX]))
        out.append("|" + "|".join(bands) + "|")
        if r % BOX == BOX - 1:
            out.append(BORDER)
    return "\n".join(out) + "\n"
