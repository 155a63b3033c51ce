"""Command-line filter: read a puzzle from a file or stdin, solve it by backtracking, print the solution."""

# sudoku_cli.py
# Usage:
#   sudoku puzzle.txt
#   sudoku --pretty < puzzle.txt
#   sudoku -P --config sudoku.yaml -v puzzle.txt
#
# Exit status: 0 solved, 1 no solution, 2 unreadable/invalid input.

from __future__ import annotations

import argparse
import sys
import time
from importlib.metadata import PackageNotFoundError, version

import yaml

from apps.cli.config import resolve_config
from solver.puzzle_io import PuzzleFormatError, format_grid, parse_puzzle
from solver.sudoku_tools import SolveStats, solve

try:
    __version__ = version("sudoku-backtrack")
except PackageNotFoundError:
    # running from a source checkout that was never installed
    __version__ = "0+unknown"

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, verbose: bool = False) -> None:
    # stdout carries the solution; progress goes to stderr
    if verbose:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku", description="Solve Sudoku puzzles")
    ap.add_argument("-P", "--pretty", action="store_true", default=None,
                    help="Output the solution with borders and spacing")
    ap.add_argument("-v", "--verbose", action="store_true", default=None,
                    help="Log progress to stderr")
    ap.add_argument("--config", type=str, default=None,
                    help="YAML file with defaults for 'pretty' and 'verbose'")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("infile", nargs="?", default="-",
                    help="File containing Sudoku puzzle to solve (default: read from stdin)")
    return ap


def open_input(infile: str):
    if infile == "-":
        return sys.stdin
    return open(infile, "r", encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(args.config, pretty=args.pretty, verbose=args.verbose)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error reading config: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    verbose = bool(cfg.verbose)

    log(f"reading {'stdin' if args.infile == '-' else args.infile}", verbose=verbose)
    try:
        f = open_input(args.infile)
    except OSError as e:
        print(f"Error opening input file: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    try:
        text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    finally:
        if f is not sys.stdin:
            f.close()

    try:
        grid = parse_puzzle(text)
    except PuzzleFormatError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    log(f"solving {len(grid.givens())} givens:\n{format_grid(grid, pretty=True)}", verbose=verbose)
    stats = SolveStats()
    t0 = time.time()
    solved = solve(grid, stats)
    log(
        f"search done: solved={solved}, placements={stats.placements:,}, "
        f"backtracks={stats.backtracks:,}, depth={stats.depth}, elapsed={time.time() - t0:,.3f}s",
        verbose=verbose,
    )

    if not solved:
        print("No solution", file=sys.stderr)
        return EXIT_NO_SOLUTION

    sys.stdout.write(format_grid(grid, pretty=bool(cfg.pretty)))
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
