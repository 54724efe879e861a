"""Text renderings of a puzzle: the candidate board, a per-block dump, and a compact digits-only view."""

# render.py
from __future__ import annotations

from types_sudoku import Move

from .solver_core import Cell, Puzzle

CELL_WIDTH = 13
SEPARATOR = "-" * (1 + 9 * CELL_WIDTH + 3)


def format_candidates(cell: Cell) -> str:
    return "[" + ",".join(str(d) for d in cell.sorted_candidates()) + "]"


def format_cell(cell: Cell) -> str:
    return str(cell.value) if cell.resolved else format_candidates(cell)


def display(puzzle: Puzzle) -> str:
    """Fixed-width board; unresolved cells show their candidates, e.g. [2,5,8]."""
    out = ["\n", SEPARATOR, "\n"]
    for r in range(9):
        out.append("|")
        for c in range(9):
            out.append(f"{format_cell(puzzle.cells[r][c]):<{CELL_WIDTH}}")
            if (c + 1) % 3 == 0:
                out.append("|")
        if (r + 1) % 3 == 0:
            out.extend(["\n", SEPARATOR, "\n"])
        else:
            out.append("\n")
    return "".join(out)


def internals(puzzle: Puzzle) -> str:
    """Block-by-block listing of every cell's value or candidate list."""
    out = []
    for b in range(9):
        out.append(f"Block {b}:\n")
        for i, row in enumerate(puzzle.block(b)):
            for j, cell in enumerate(row):
                shown = str(cell.value) if cell.resolved else str(cell.sorted_candidates())
                out.append(f"    ({i},{j}) → {shown}\n")
        out.append("\n")
    return "".join(out)


def compact(puzzle: Puzzle) -> str:
    """Digits only, '·' for blanks, blocks separated by whitespace."""
    out = []
    for r, row in enumerate(puzzle.cells):
        for c, cell in enumerate(row):
            out.append(str(cell.value) if cell.resolved else "·")
            if c != 0 and (c + 1) % 3 == 0:
                out.append("  ")
        out.append("\n")
        if r != 0 and (r + 1) % 3 == 0:
            out.append("\n")
    return "".join(out)


def render_move(move: Move) -> str:
    idx = move.get("index")
    prefix = f"#{idx}  " if idx else ""
    return f"{prefix}{move.get('technique', '?')}: {move.get('cell', '')} = {move.get('digit', '')}"


def snapshot_text(puzzle: Puzzle, moves: list[Move] | None = None) -> str:
    """Board plus the placements of the last consolidation, for debug sinks."""
    text = display(puzzle)
    if moves is None:
        return text
    if not moves:
        return text + "\nLast consolidation: no progress\n"
    return text + "\nLast consolidation:\n" + "".join(f"  {render_move(m)}\n" for m in moves)
