# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Project Euler 96, grid 01 (32 givens, unique solution)
PUZZLE_ROWS = [
    [0, 0, 3, 0, 2, 0, 6, 0, 0],
    [9, 0, 0, 3, 0, 5, 0, 0, 1],
    [0, 0, 1, 8, 0, 6, 4, 0, 0],
    [0, 0, 8, 1, 0, 2, 9, 0, 0],
    [7, 0, 0, 0, 0, 0, 0, 0, 8],
    [0, 0, 6, 7, 0, 8, 2, 0, 0],
    [0, 0, 2, 6, 0, 9, 5, 0, 0],
    [8, 0, 0, 2, 0, 3, 0, 0, 9],
    [0, 0, 5, 0, 1, 0, 3, 0, 0],
]

SOLUTION_ROWS = [
    [4, 8, 3, 9, 2, 1, 6, 5, 7],
    [9, 6, 7, 3, 4, 5, 8, 2, 1],
    [2, 5, 1, 8, 7, 6, 4, 9, 3],
    [5, 4, 8, 1, 3, 2, 9, 7, 6],
    [7, 2, 9, 5, 6, 4, 1, 3, 8],
    [1, 3, 6, 7, 9, 8, 2, 4, 5],
    [3, 7, 2, 6, 8, 9, 5, 1, 4],
    [8, 1, 4, 2, 5, 3, 7, 6, 9],
    [6, 9, 5, 4, 1, 7, 3, 8, 2],
]

# r1c9 has no candidate: row 1 holds 1..8 and column 9 holds the 9.
DEAD_END_ROWS = [
    [1, 2, 3, 4, 5, 6, 7, 8, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 9],
] + [[0] * 9 for _ in range(7)]


@pytest.fixture
def puzzle_rows():
    return [row[:] for row in PUZZLE_ROWS]


@pytest.fixture
def solution_rows():
    return [row[:] for row in SOLUTION_ROWS]


@pytest.fixture
def dead_end_rows():
    return [row[:] for row in DEAD_END_ROWS]


PRETTY_SOLUTION = (
    "+-----+-----+-----+\n"
    "|4 8 3|9 2 1|6 5 7|\n"
    "|9 6 7|3 4 5|8 2 1|\n"
    "|2 5 1|8 7 6|4 9 3|\n"
    "+-----+-----+-----+\n"
    "|5 4 8|1 3 2|9 7 6|\n"
    "|7 2 9|5 6 4|1 3 8|\n"
    "|1 3 6|7 9 8|2 4 5|\n"
    "+-----+-----+-----+\n"
    "|3 7 2|6 8 9|5 1 4|\n"
    "|8 1 4|2 5 3|7 6 9|\n"
    "|6 9 5|4 1 7|3 8 2|\n"
    "+-----+-----+-----+\n"
)


@pytest.fixture
def pretty_solution():
    return PRETTY_SOLUTION
