"""Candidate derivation and propagation: peer elimination, locked candidates (pointing), and pinned subsets, run to a fixpoint."""

# candidates.py
# Eliminations only; nothing here places a value.
from __future__ import annotations

from .logging_utils import get_logger
from .solver_core import DIGITS, Cell, Puzzle, unit_cells_box, which_box

logger = get_logger()


def peer_candidates(puzzle: Puzzle, r: int, c: int) -> set[int]:
    """Digits not already present in the cell's row, column, or block."""
    used = (
        puzzle.numbers_in_row(r)
        | puzzle.numbers_in_column(c)
        | puzzle.numbers_in_block(which_box(r, c))
    )
    return set(DIGITS) - used


def eliminate_locked_candidates(puzzle: Puzzle) -> int:
    """If in a block a digit's candidates (2 or 3 cells) lie in a single row (or column),
    eliminate that digit from the rest of that row (or column) outside the block.
    Returns the number of candidates removed.
    """
    removed = 0
    for b in range(9):
        box = unit_cells_box(b)
        for d in DIGITS:
            locs = [(r, c) for (r, c) in box if d in puzzle.cells[r][c].candidates]
            if len(locs) not in (2, 3):
                continue
            rows = {r for r, _ in locs}
            cols = {c for _, c in locs}
            if len(rows) == 1:
                r = rows.pop()
                line = [(r, c) for c in range(9)]
            elif len(cols) == 1:
                c = cols.pop()
                line = [(r, c) for r in range(9)]
            else:
                continue
            for rr, cc in line:
                if (rr, cc) in box:
                    continue
                cell = puzzle.cells[rr][cc]
                if d in cell.candidates:
                    cell.candidates.discard(d)
                    removed += 1
    return removed


def reduce_pinned_subsets(cells: list[Cell]) -> int:
    """Within one peer group: a candidate set shared verbatim by exactly as many cells as
    it has members is pinned to those cells; drop its members from every other cell.

    Only identical sets of two or more digits are matched; a lone candidate is left
    to the naked-single tier. Three distinct pairs covering three digits
    ({1,2},{2,3},{1,3}) are not recognised as a triple.
    """
    removed = 0
    for cell in cells:
        if len(cell.candidates) < 2:
            continue
        pinned = frozenset(cell.candidates)
        holders = sum(1 for other in cells if other.candidates == pinned)
        if holders != len(pinned):
            continue
        for other in cells:
            if other.candidates == pinned:
                continue
            hit = other.candidates & pinned
            if hit:
                other.candidates -= pinned
                removed += len(hit)
    return removed


def eliminate_pinned_subsets(puzzle: Puzzle) -> int:
    removed = 0
    for kind, i, cells in puzzle.peer_groups():
        n = reduce_pinned_subsets(cells)
        if n:
            logger.debug("Pinned subsets in %s %d removed %d candidate(s)", kind, i, n)
        removed += n
    return removed


def propagate(puzzle: Puzzle) -> int:
    """Run both elimination passes until a full round removes nothing. Returns total removals."""
    total = 0
    while True:
        removed = eliminate_locked_candidates(puzzle)
        removed += eliminate_pinned_subsets(puzzle)
        total += removed
        if not removed:
            return total


def assign_candidates(puzzle: Puzzle) -> int:
    """Recompute every unresolved cell's candidates from its peers, then propagate to a fixpoint.

    Resolved cells always end with an empty candidate set.
    """
    for r, c in puzzle.coords():
        cell = puzzle.cells[r][c]
        if cell.resolved:
            cell.candidates = set()
        else:
            cell.candidates = peer_candidates(puzzle, r, c)
    return propagate(puzzle)
