"""Sudoku solving by constraint propagation with a guess-and-backtrack fallback.

    from sudoku_solver import solve_puzzle

    result = solve_puzzle(open("puzzle.txt").read())
"""

from .candidates import assign_candidates, propagate
from .config import SolverConfig, load_config
from .consolidation import consolidate
from .parser import parse_puzzle
from .render import display
from .report import Outcome, report_outcome
from .search import SolveResult, SudokuSolver, solve_puzzle, solve_with_guesses
from .solver_core import Cell, Puzzle
from .status import IllDefined, Solved, Unsolved, status

__all__ = [
    "Cell",
    "IllDefined",
    "Outcome",
    "Puzzle",
    "SolveResult",
    "Solved",
    "SolverConfig",
    "SudokuSolver",
    "Unsolved",
    "assign_candidates",
    "consolidate",
    "display",
    "load_config",
    "parse_puzzle",
    "propagate",
    "report_outcome",
    "solve_puzzle",
    "solve_with_guesses",
    "status",
]
