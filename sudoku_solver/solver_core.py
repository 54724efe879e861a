"""Core Sudoku grid model: cells, index math, peer groups, and grid mutation helpers."""

# solver_core.py
# - Cell / Puzzle containers
# - row/col <-> block arithmetic (0-based internally)
# - peer-group extraction (values present, cells in group)
# Human-facing cell keys ('r1c1') stay 1-based.
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterator

from types_sudoku import Candidates, Grid

Coord = tuple[int, int]  # (row, col) 0-based

DIGITS = range(1, 10)
SIZE = 9


def check_index(kind: str, i: int) -> int:
    """Guard a row/column/block/local index at the API boundary."""
    limit = 3 if kind.startswith("local") else SIZE
    if not isinstance(i, int) or not 0 <= i < limit:
        raise IndexError(f"Invalid {kind} number: {i}")
    return i


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def key_to_rc(key: str) -> Coord:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (check_index("row", r - 1), check_index("column", c - 1))


def which_box(r: int, c: int) -> int:
    return (r // 3) * 3 + c // 3


def box_origin(b: int) -> Coord:
    check_index("block", b)
    return ((b // 3) * 3, (b % 3) * 3)


def to_box_local(r: int, c: int) -> tuple[int, int, int]:
    """(row, col) -> (block, local_row, local_col)."""
    check_index("row", r)
    check_index("column", c)
    return which_box(r, c), r % 3, c % 3


def from_box_local(b: int, i: int, j: int) -> Coord:
    """(block, local_row, local_col) -> (row, col)."""
    r0, c0 = box_origin(b)
    check_index("local row", i)
    check_index("local column", j)
    return r0 + i, c0 + j


def unit_cells_row(r: int) -> list[Coord]:
    check_index("row", r)
    return [(r, c) for c in range(SIZE)]


def unit_cells_col(c: int) -> list[Coord]:
    check_index("column", c)
    return [(r, c) for r in range(SIZE)]


def unit_cells_box(b: int) -> list[Coord]:
    r0, c0 = box_origin(b)
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


@dataclass
class Cell:
    value: int | None = None
    given: bool = False
    candidates: set[int] = field(default_factory=set)

    @property
    def resolved(self) -> bool:
        return self.value is not None

    def sorted_candidates(self) -> list[int]:
        return sorted(self.candidates)


class Puzzle:
    """A 9x9 grid of cells. Branches of the search own independent copies (see clone())."""

    def __init__(self, cells: list[list[Cell]] | None = None):
        if cells is None:
            cells = [[Cell() for _ in range(SIZE)] for _ in range(SIZE)]
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise ValueError("A puzzle needs exactly 9 rows of 9 cells.")
        self.cells = cells

    @classmethod
    def from_rows(cls, rows: Grid) -> Puzzle:
        """Build a puzzle from rows of ints; non-zero digits become givens."""
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Grid must be 9x9.")
        cells = []
        for row in rows:
            out = []
            for v in row:
                if v not in range(0, 10):
                    raise ValueError(f"Invalid digit {v!r}; expected 0..9.")
                out.append(Cell(value=v, given=True) if v else Cell())
            cells.append(out)
        return cls(cells)

    def to_rows(self) -> Grid:
        return [[cell.value or 0 for cell in row] for row in self.cells]

    def clone(self) -> Puzzle:
        return Puzzle(copy.deepcopy(self.cells))

    def cell(self, r: int, c: int) -> Cell:
        return self.cells[check_index("row", r)][check_index("column", c)]

    def assign(self, r: int, c: int, value: int) -> None:
        """Place a value and clear the cell's candidates."""
        if value not in DIGITS:
            raise ValueError(f"Invalid digit {value!r}; expected 1..9.")
        cell = self.cell(r, c)
        if cell.given:
            raise ValueError(f"Cannot reassign given cell {rc_to_key(r, c)}.")
        cell.value = value
        cell.candidates = set()

    def cells_in_row(self, r: int) -> list[Cell]:
        return [self.cells[rr][cc] for rr, cc in unit_cells_row(r)]

    def cells_in_column(self, c: int) -> list[Cell]:
        return [self.cells[rr][cc] for rr, cc in unit_cells_col(c)]

    def cells_in_block(self, b: int) -> list[Cell]:
        return [self.cells[rr][cc] for rr, cc in unit_cells_box(b)]

    def block(self, b: int) -> list[list[Cell]]:
        """The block as a 3x3 array, local rows top to bottom."""
        flat = self.cells_in_block(b)
        return [flat[i * 3:(i + 1) * 3] for i in range(3)]

    def numbers_in_row(self, r: int) -> set[int]:
        return {cell.value for cell in self.cells_in_row(r) if cell.resolved}

    def numbers_in_column(self, c: int) -> set[int]:
        return {cell.value for cell in self.cells_in_column(c) if cell.resolved}

    def numbers_in_block(self, b: int) -> set[int]:
        return {cell.value for cell in self.cells_in_block(b) if cell.resolved}

    def peer_groups(self) -> Iterator[tuple[str, int, list[Cell]]]:
        """All 27 peer groups: rows, then columns, then blocks."""
        for i in range(SIZE):
            yield "row", i, self.cells_in_row(i)
        for i in range(SIZE):
            yield "col", i, self.cells_in_column(i)
        for i in range(SIZE):
            yield "box", i, self.cells_in_block(i)

    def coords(self) -> Iterator[Coord]:
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c

    def is_complete(self) -> bool:
        return all(self.cells[r][c].resolved for r, c in self.coords())

    def candidates_map(self) -> Candidates:
        """Candidates of unresolved cells keyed by 'rNcM'."""
        return {
            rc_to_key(r, c): self.cells[r][c].sorted_candidates()
            for r, c in self.coords()
            if not self.cells[r][c].resolved
        }

    def __str__(self) -> str:
        from .render import compact

        return compact(self)
