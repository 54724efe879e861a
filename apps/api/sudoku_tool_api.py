# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver.parser import parse_puzzle
from sudoku_solver.sudoku_tools import apply_move as _apply_move
from sudoku_solver.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool
from sudoku_solver.sudoku_tools import next_moves as _next_moves

app = FastAPI(title="Sudoku Solver Tool API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


class NextMovesRequest(BaseModel):
    current: list[list[int]]


class MoveModel(BaseModel):
    cell: str
    digit: int


class ApplyMoveRequest(BaseModel):
    current: list[list[int]]
    move: MoveModel


class SolveRequest(BaseModel):
    current: list[list[int]] | None = None
    text: str | None = None
    use_guessing: bool = True


def _guarded(fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except (ValueError, IndexError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    return _guarded(sanity_check, payload.original, payload.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return _guarded(compute_candidates_tool, payload.grid)


@app.post("/next_moves")
def api_moves(req: NextMovesRequest):
    return _guarded(_next_moves, req.current)


@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    return _guarded(_apply_move, req.current, req.move.model_dump())


@app.post("/solve")
def api_solve(req: SolveRequest):
    if req.current is None and req.text is None:
        raise HTTPException(status_code=422, detail="Provide either 'current' or 'text'.")
    grid = req.current if req.current is not None else parse_puzzle(req.text).to_rows()
    return _guarded(solve_tool, grid, use_guessing=req.use_guessing)
