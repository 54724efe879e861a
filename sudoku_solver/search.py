"""Step/solve loop plus the guess-and-backtrack search used when propagation stalls."""

# search.py
# Every guess works on a cloned puzzle, so a discarded branch is simply dropped.
from __future__ import annotations

import itertools
from dataclasses import dataclass

from types_sudoku import Move

from .candidates import assign_candidates
from .config import SolverConfig
from .consolidation import consolidate
from .logging_utils import get_logger
from .parser import parse_puzzle
from .render import snapshot_text
from .snapshots import Observer, observer_from_config
from .solver_core import Puzzle, rc_to_key
from .status import IllDefined, Solved, Status, Unsolved, status

logger = get_logger()


@dataclass
class SolveResult:
    puzzle: Puzzle
    status: Status
    steps: int  # engine steps across the main loop and every guess branch
    guesses: int = 0
    exhausted: bool = False  # the guess tree was searched without reaching a solution


class SudokuSolver:
    def __init__(
        self,
        puzzle: Puzzle,
        observer: Observer | None = None,
        label_prefix: str = "",
        depth: int = 0,
        branch_ids: itertools.count | None = None,
    ):
        self.puzzle = puzzle
        self.observer = observer
        self.label_prefix = label_prefix
        self.depth = depth
        self.iteration = 0
        self.guesses = 0
        self.branch_steps = 0
        # shared by the whole search tree so snapshot labels stay short and unique
        self.branch_ids = branch_ids if branch_ids is not None else itertools.count(1)

    @property
    def total_steps(self) -> int:
        return self.iteration + self.branch_steps

    def _absorb(self, branch: SudokuSolver) -> None:
        self.guesses += branch.guesses
        self.branch_steps += branch.total_steps

    def _notify(self, label: str, moves: list[Move] | None = None) -> None:
        if self.observer is None:
            return
        self.observer(self.label_prefix + label, snapshot_text(self.puzzle, moves))

    def step(self) -> list[Move]:
        """Propagate candidates to a fixpoint, then consolidate once."""
        self.iteration += 1
        logger.debug("%sStarting step #%d", self.label_prefix, self.iteration)
        assign_candidates(self.puzzle)
        self._notify(f"step-{self.iteration}-candidates")

        moves = consolidate(self.puzzle)
        self._notify(f"step-{self.iteration}-consolidated", moves)
        return moves

    def solve(self) -> Status:
        """Step until nothing is placed, or the grid is solved or ill-defined."""
        while True:
            moves = self.step()
            st = status(self.puzzle)
            logger.debug("%sStep %d progressed by %d", self.label_prefix, self.iteration, len(moves))
            if not moves or isinstance(st, (Solved, IllDefined)):
                return st

    def pick_pivot(self) -> tuple[int, int, list[int]] | None:
        """Last unresolved cell (row-major) that still has candidates."""
        pivot = None
        for r, c in self.puzzle.coords():
            cell = self.puzzle.cells[r][c]
            if not cell.resolved and cell.candidates:
                pivot = (r, c, cell.sorted_candidates())
        return pivot

    def solve_with_guesses(self) -> Puzzle | None:
        """Depth-first search over the pivot cell's candidates, largest first.

        Returns the first solved puzzle found, or None when every guess fails.
        """
        pivot = self.pick_pivot()
        if pivot is None:
            return None
        r, c, options = pivot
        for value in reversed(options):
            self.guesses += 1
            key = rc_to_key(r, c)
            branch_puzzle = self.puzzle.clone()
            branch_puzzle.assign(r, c, value)
            branch_id = next(self.branch_ids)
            branch = SudokuSolver(
                branch_puzzle,
                self.observer,
                label_prefix=f"b{branch_id}-",
                depth=self.depth + 1,
                branch_ids=self.branch_ids,
            )
            logger.info("Guess b%d (depth %d): %s = %d", branch_id, self.depth + 1, key, value)
            st = branch.solve()
            if isinstance(st, Solved):
                self._absorb(branch)
                return branch_puzzle
            if isinstance(st, IllDefined):
                self._absorb(branch)
                logger.info("Backtrack b%d: %s != %d (%s)", branch_id, key, value, st.reason.describe())
                continue
            result = branch.solve_with_guesses()
            self._absorb(branch)
            if result is not None:
                return result
            logger.info("Backtrack b%d: %s != %d (no guess below it worked)", branch_id, key, value)
        return None


def solve_with_guesses(puzzle: Puzzle, observer: Observer | None = None) -> Puzzle | None:
    """Backtracking search from a stalled puzzle; the input puzzle is left untouched."""
    return SudokuSolver(puzzle, observer).solve_with_guesses()


def solve_puzzle(
    source: str | Puzzle,
    config: SolverConfig | None = None,
    observer: Observer | None = None,
) -> SolveResult:
    """Parse (if needed), propagate and consolidate until stalled, then guess if allowed.

    A Puzzle argument is cloned, never mutated.
    """
    config = config or SolverConfig()
    puzzle = parse_puzzle(source) if isinstance(source, str) else source.clone()
    if observer is None:
        observer = observer_from_config(config)

    solver = SudokuSolver(puzzle, observer)
    st = solver.solve()
    exhausted = False
    if isinstance(st, Unsolved) and config.use_guessing:
        logger.info("Stalled after %d step(s); starting guess search.", solver.iteration)
        result = solver.solve_with_guesses()
        if result is None:
            exhausted = True
        else:
            puzzle = result
            st = status(puzzle)
    return SolveResult(puzzle, st, solver.total_steps, solver.guesses, exhausted)
