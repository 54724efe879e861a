# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a sorted list of candidate digits (1..9)."""


class Move(TypedDict, total=False):
    """A single forced assignment reported by the consolidation engine."""

    index: int  # 1-based order within one consolidate() call
    technique: str  # 'naked_single', 'hidden_single_block', 'hidden_single_row', 'hidden_single_col', 'guess'
    type: str  # always 'placement' for consolidation records
    digit: int  # the digit being placed
    cell: str  # target cell (e.g., 'r4c7'), 1-based
    explanation: dict[str, Any]  # human-readable reason and the units involved
    highlights: dict[str, Any]  # row/col/box/cells touched by the deduction
