# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import AfterValidator, BaseModel
from typing import Annotated, List, Optional

from solver.puzzle_io import PuzzleFormatError, format_grid, parse_puzzle
from solver.solver_core import SudokuGrid
from solver.sudoku_tools import sanity_check, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")


def _check_grid(v: List[List[int]]) -> List[List[int]]:
    if len(v) != 9 or any(len(row) != 9 for row in v):
        raise ValueError("grid must be 9 rows of 9 cells")
    if any(not 0 <= d <= 9 for row in v for d in row):
        raise ValueError("cells must be digits 0..9 (0 = blank)")
    return v


GridRows = Annotated[List[List[int]], AfterValidator(_check_grid)]


class GridModel(BaseModel):
    grid: GridRows


class SanityRequest(BaseModel):
    current: GridRows
    original: Optional[GridRows] = None


class ParseRequest(BaseModel):
    text: str


class FormatRequest(GridModel):
    pretty: bool = False


@app.post("/solve")
def api_solve(payload: GridModel):
    return solve_tool(payload.grid)


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.current, req.original)


@app.post("/parse")
def api_parse(req: ParseRequest):
    try:
        grid = parse_puzzle(req.text)
    except PuzzleFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"grid": grid.to_rows()}


@app.post("/format")
def api_format(req: FormatRequest):
    return {"text": format_grid(SudokuGrid(req.grid), pretty=req.pretty)}
