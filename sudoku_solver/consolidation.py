"""Turn propagated candidates into forced placements, trying one technique tier at a time."""

# consolidation.py
# Tier order: naked singles (all at once), then the first hidden single found in
# a block, a row, or a column. An empty result means the grid is stalled.
from __future__ import annotations

from types_sudoku import Move

from .solver_core import Puzzle, from_box_local, key_to_rc, rc_to_key, which_box


def _placement(technique: str, r: int, c: int, digit: int, why: str, units: dict, highlights: dict) -> Move:
    key = rc_to_key(r, c)
    return {
        "technique": technique,
        "type": "placement",
        "cell": key,
        "digit": digit,
        "explanation": {"why": why, "units": units},
        "highlights": {"cells": [key], **highlights},
    }


def find_naked_singles(puzzle: Puzzle) -> list[Move]:
    moves = []
    for r, c in puzzle.coords():
        cell = puzzle.cells[r][c]
        if not cell.resolved and len(cell.candidates) == 1:
            (d,) = cell.candidates
            moves.append(
                _placement(
                    "naked_single",
                    r,
                    c,
                    d,
                    f"Only one candidate fits r{r + 1}c{c + 1}.",
                    {"row": f"r{r + 1}", "col": f"c{c + 1}", "box": f"b{which_box(r, c) + 1}"},
                    {},
                )
            )
    return moves


def _count_in(puzzle: Puzzle, coords, digit: int) -> int:
    return sum(
        1
        for r, c in coords
        if not puzzle.cells[r][c].resolved and digit in puzzle.cells[r][c].candidates
    )


def find_hidden_single_in_block(puzzle: Puzzle) -> Move | None:
    for b in range(9):
        box = [from_box_local(b, i, j) for i in range(3) for j in range(3)]
        for r, c in box:
            cell = puzzle.cells[r][c]
            if cell.resolved:
                continue
            for d in cell.sorted_candidates():
                if _count_in(puzzle, box, d) == 1:
                    return _placement(
                        "hidden_single_block",
                        r,
                        c,
                        d,
                        f"Digit {d} appears in only one cell in box {b + 1}.",
                        {"box": f"b{b + 1}"},
                        {"box": f"b{b + 1}"},
                    )
    return None


def find_hidden_single_in_row(puzzle: Puzzle) -> Move | None:
    for r in range(9):
        line = [(r, c) for c in range(9)]
        for _, c in line:
            cell = puzzle.cells[r][c]
            if cell.resolved:
                continue
            for d in cell.sorted_candidates():
                if _count_in(puzzle, line, d) == 1:
                    return _placement(
                        "hidden_single_row",
                        r,
                        c,
                        d,
                        f"Digit {d} appears in only one cell in row {r + 1}.",
                        {"row": f"r{r + 1}", "box": f"b{which_box(r, c) + 1}"},
                        {"row": f"r{r + 1}"},
                    )
    return None


def find_hidden_single_in_column(puzzle: Puzzle) -> Move | None:
    for c in range(9):
        line = [(r, c) for r in range(9)]
        for r, _ in line:
            cell = puzzle.cells[r][c]
            if cell.resolved:
                continue
            for d in cell.sorted_candidates():
                if _count_in(puzzle, line, d) == 1:
                    return _placement(
                        "hidden_single_col",
                        r,
                        c,
                        d,
                        f"Digit {d} appears in only one cell in column {c + 1}.",
                        {"col": f"c{c + 1}", "box": f"b{which_box(r, c) + 1}"},
                        {"col": f"c{c + 1}"},
                    )
    return None


HIDDEN_SINGLE_TIERS = (
    find_hidden_single_in_block,
    find_hidden_single_in_row,
    find_hidden_single_in_column,
)


def apply_placements(puzzle: Puzzle, moves: list[Move]) -> None:
    for i, move in enumerate(moves, 1):
        move["index"] = i
        r, c = key_to_rc(move["cell"])
        puzzle.assign(r, c, move["digit"])


def consolidate(puzzle: Puzzle) -> list[Move]:
    """Apply the first tier that finds anything and return its placements.

    Naked singles are resolved together; hidden singles one at a time.
    """
    moves = find_naked_singles(puzzle)
    if not moves:
        for finder in HIDDEN_SINGLE_TIERS:
            move = finder(puzzle)
            if move is not None:
                moves = [move]
                break
    apply_placements(puzzle, moves)
    return moves
