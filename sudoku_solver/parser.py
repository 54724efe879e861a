"""Read puzzles from text: one row per non-blank line, digits 1-9 are givens, anything else is blank."""

from __future__ import annotations

from types_sudoku import Grid

from .solver_core import Cell, Puzzle


def parse_puzzle(text: str) -> Puzzle:
    """Parse puzzle text such as:

        .4.5.2...
        76....1.2

    Blank lines are skipped and do not count as rows. Short lines leave the
    remaining columns blank; characters past column 9 and lines past row 9 are ignored.
    """
    puzzle = Puzzle()
    rows = [line.strip() for line in text.strip().splitlines()]
    rows = [line for line in rows if line]
    for r, line in enumerate(rows[:9]):
        for c, ch in enumerate(line[:9]):
            if ch in "123456789":
                puzzle.cells[r][c] = Cell(value=int(ch), given=True)
    return puzzle


def parse_grid(rows: Grid) -> Puzzle:
    """Rows of ints (0 = blank) -> Puzzle."""
    return Puzzle.from_rows(rows)


def read_puzzle(path: str) -> Puzzle:
    with open(path, "r", encoding="utf-8") as f:
        return parse_puzzle(f.read())
