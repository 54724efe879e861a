"""Tool-friendly helpers over plain 9x9 int grids: sanity checks, candidates, one engine step, and full solves.
Used by the API and the CLI; inputs are never mutated."""

# sudoku_tools.py
from __future__ import annotations

from typing import Any, Dict

from types_sudoku import Grid, Move

from .candidates import assign_candidates
from .config import SolverConfig
from .report import report_outcome
from .search import SudokuSolver, solve_puzzle
from .solver_core import Puzzle, key_to_rc, rc_to_key, unit_cells_box
from .status import status, status_to_dict


def _duplicates_in_unit(vals) -> set[int]:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report overwritten givens and duplicate digits per unit (1-based unit names)."""
    issues = []
    for r in range(9):
        for c in range(9):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r][c], "found": current[r][c]})
    for r in range(9):
        dups = _duplicates_in_unit(current[r])
        if dups:
            cells = [rc_to_key(r, c) for c in range(9) if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"r{r + 1}", "digits": sorted(dups), "cells": cells})
    for c in range(9):
        dups = _duplicates_in_unit(current[r][c] for r in range(9))
        if dups:
            cells = [rc_to_key(r, c) for r in range(9) if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"c{c + 1}", "digits": sorted(dups), "cells": cells})
    for b in range(9):
        box = unit_cells_box(b)
        dups = _duplicates_in_unit(current[r][c] for r, c in box)
        if dups:
            bad = [rc_to_key(r, c) for r, c in box if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"b{b + 1}", "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Propagated candidates for each empty cell, e.g. {'candidates': {'r1c2': [1, 2, 5], ...}, 'status': {...}}."""
    puzzle = Puzzle.from_rows(current)
    assign_candidates(puzzle)
    return {"candidates": puzzle.candidates_map(), "status": status_to_dict(status(puzzle))}


def next_moves(current: Grid) -> Dict:
    """Run one engine step on a copy of `current` and return its placements and the resulting grid."""
    solver = SudokuSolver(Puzzle.from_rows(current))
    moves: list[Move] = solver.step()
    return {
        "moves": moves,
        "snapshot": {"current": solver.puzzle.to_rows(), "candidates": solver.puzzle.candidates_map()},
        "status": status_to_dict(status(solver.puzzle)),
    }


def apply_move(current: Grid, move: Dict) -> Dict:
    """Place move['digit'] at move['cell'] and recompute candidates."""
    puzzle = Puzzle.from_rows(current)
    r, c = key_to_rc(move["cell"])
    # every filled cell of a plain grid counts as given, so assign() rejects it
    puzzle.assign(r, c, int(move["digit"]))
    assign_candidates(puzzle)
    return {"current": puzzle.to_rows(), "candidates": puzzle.candidates_map()}


def solve_tool(current: Grid, use_guessing: bool = True) -> Dict[str, Any]:
    """Solve from a grid and report the outcome."""
    result = solve_puzzle(Puzzle.from_rows(current), SolverConfig(use_guessing=use_guessing))
    outcome = report_outcome(result.status, result.exhausted)
    return {
        "solution": result.puzzle.to_rows(),
        "status": status_to_dict(result.status),
        "steps": result.steps,
        "guesses": result.guesses,
        "signal": outcome.signal,
        "message": outcome.message,
    }
