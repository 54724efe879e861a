"""Classify a grid as solved, unsolved, or ill-defined (with the reason it cannot be completed)."""

# status.py
from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Union

from .solver_core import Puzzle


@dataclass(frozen=True)
class NoPossibleSolution:
    row: int
    col: int

    def describe(self) -> str:
        return f"No possible candidates for cell ({self.row},{self.col})."


@dataclass(frozen=True)
class NumberRepeatsInRow:
    value: int
    row: int

    def describe(self) -> str:
        return f"Number {self.value} repeats in row {self.row}."


@dataclass(frozen=True)
class NumberRepeatsInColumn:
    value: int
    col: int

    def describe(self) -> str:
        return f"Number {self.value} repeats in column {self.col}."


@dataclass(frozen=True)
class NumberRepeatsInBlock:
    value: int
    block: int

    def describe(self) -> str:
        return f"Number {self.value} repeats in block {self.block}."


IllDefinedReason = Union[
    NoPossibleSolution, NumberRepeatsInRow, NumberRepeatsInColumn, NumberRepeatsInBlock
]


@dataclass(frozen=True)
class Solved:
    pass


@dataclass(frozen=True)
class Unsolved:
    pass


@dataclass(frozen=True)
class IllDefined:
    reason: IllDefinedReason


Status = Union[Solved, Unsolved, IllDefined]


def _repeated(values) -> int | None:
    """Smallest digit occurring more than once, if any."""
    counts = Counter(v for v in values if v is not None)
    for d in range(1, 10):
        if counts[d] > 1:
            return d
    return None


def status(puzzle: Puzzle) -> Status:
    """First match wins: empty cell, row repeat, column repeat, block repeat; then solved/unsolved.

    An unresolved cell with no candidates counts as a dead end, so call this after
    candidates have been assigned.
    """
    for r, c in puzzle.coords():
        cell = puzzle.cells[r][c]
        if not cell.resolved and not cell.candidates:
            return IllDefined(NoPossibleSolution(r, c))

    for r in range(9):
        d = _repeated(cell.value for cell in puzzle.cells_in_row(r))
        if d is not None:
            return IllDefined(NumberRepeatsInRow(d, r))
    for c in range(9):
        d = _repeated(cell.value for cell in puzzle.cells_in_column(c))
        if d is not None:
            return IllDefined(NumberRepeatsInColumn(d, c))
    for b in range(9):
        d = _repeated(cell.value for cell in puzzle.cells_in_block(b))
        if d is not None:
            return IllDefined(NumberRepeatsInBlock(d, b))

    return Solved() if puzzle.is_complete() else Unsolved()


def status_name(st: Status) -> str:
    if isinstance(st, Solved):
        return "solved"
    if isinstance(st, IllDefined):
        return "ill_defined"
    return "unsolved"


def status_to_dict(st: Status) -> dict:
    out = {"status": status_name(st)}
    if isinstance(st, IllDefined):
        reason = st.reason
        out["reason"] = {"kind": type(reason).__name__, **asdict(reason), "message": reason.describe()}
    return out
