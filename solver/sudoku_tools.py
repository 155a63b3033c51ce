"""Backtracking search over a SudokuGrid, plus tool-friendly wrappers (sanity check, solve payloads) used by the CLI and the API."""

# sudoku_tools.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional

from types_sudoku import DIGITS, EMPTY, SIZE, Grid, SanityIssue

from .solver_core import SudokuGrid, all_units, cell_key

PlaceHook = Callable[[SudokuGrid, int, int, int], None]


@dataclass
class SolveStats:
    placements: int = 0
    backtracks: int = 0
    depth: int = 0


def solve(
    grid: SudokuGrid,
    stats: SolveStats | None = None,
    on_place: PlaceHook | None = None,
) -> bool:
    """Fill every empty cell of `grid` in place by depth-first backtracking.

    Empty cells are visited in row-major order and digits are tried in
    ascending order; the first complete assignment found is kept. When a
    puzzle has several solutions, which one is returned depends only on
    that order (it is not otherwise specified).

    Returns True on success, leaving `grid` solved. Returns False when no
    completion exists, leaving `grid` exactly as it was passed in. Givens
    that already repeat a digit within a row, column or box are rejected
    as unsolvable without searching.

    `on_place(grid, row, col, digit)` is called after every speculative
    placement.
    """
    if not grid.is_legal():
        return False
    return _search(grid, stats, on_place, 1)


def _search(grid: SudokuGrid, stats: SolveStats | None, on_place: PlaceHook | None, depth: int) -> bool:
    cell = grid.find_next_empty()
    if cell is None:
        return True
    r, c = cell
    if stats is not None and depth > stats.depth:
        stats.depth = depth
    for d in DIGITS:
        if not grid.can_place(r, c, d):
            continue
        grid.set(r, c, d)
        if stats is not None:
            stats.placements += 1
        solved = False
        try:
            if on_place is not None:
                on_place(grid, r, c, d)
            solved = _search(grid, stats, on_place, depth + 1)
        finally:
            # undo before the next digit, or on the way out of an exception
            if not solved:
                grid.set(r, c, EMPTY)
        if solved:
            return True
        if stats is not None:
            stats.backtracks += 1
    return False


def solve_puzzle(current: Grid) -> Optional[Grid]:
    """Solve a copy of `current`; returns the solved rows or None."""
    g = SudokuGrid(current)
    if solve(g):
        return g.to_rows()
    return None


def sanity_check(current: Grid, original: Grid | None = None) -> Dict:
    issues: List[SanityIssue] = []
    if original is not None:
        for r in range(SIZE):
            for c in range(SIZE):
                if original[r][c] != EMPTY and current[r][c] not in (EMPTY, original[r][c]):
                    issues.append({"type": "given_overwritten", "cell": cell_key(r, c),
                                   "given": original[r][c], "found": current[r][c]})

    def duplicates_in_unit(vals):
        seen = set(); dups = set()
        for v in vals:
            if v == EMPTY: continue
            if v in seen: dups.add(v)
            seen.add(v)
        return dups

    for unit, cells in all_units():
        vals = [current[r][c] for r, c in cells]
        dups = duplicates_in_unit(vals)
        if dups:
            bad = [cell_key(r, c) for (r, c), v in zip(cells, vals) if v in dups]
            issues.append({"type": "duplicate", "unit": unit, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def solve_tool(current: Grid) -> Dict:
    """Solve `current` and return a JSON-friendly payload:
    {'solved': bool, 'solution': grid | None, 'stats': {...}, 'issues': [...]}.
    Issues are reported for contradictory givens so callers can explain the failure.
    """
    check = sanity_check(current)
    grid = SudokuGrid(current)
    stats = SolveStats()
    solved = solve(grid, stats)
    return {
        "solved": solved,
        "solution": grid.to_rows() if solved else None,
        "stats": asdict(stats),
        "issues": check["issues"],
    }
