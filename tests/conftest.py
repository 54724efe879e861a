# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_solver", "apps" and "types_sudoku" import without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE = """
.4.5.2...
76....1.2
9...18.64
..429...8
.8.3.6.7.
6...754..
21.68...3
4.6....27
...4.9.1.
"""

# Arto Inkala's puzzle; propagation alone stalls on it
HARD = """
8........
..36.....
.7..9.2..
.5...7...
....457..
...1...3.
..1....68
..85...1.
.9....4..
"""

HARD_SOLUTION = [
    "812753649",
    "943682175",
    "675491283",
    "154237896",
    "369845721",
    "287169534",
    "521974368",
    "438526917",
    "796318452",
]


def rows_of(lines):
    return [[int(ch) for ch in line] for line in lines]


@pytest.fixture
def sample_text():
    return SAMPLE


@pytest.fixture
def hard_text():
    return HARD


@pytest.fixture
def hard_solution():
    return rows_of(HARD_SOLUTION)

# HARD_SOLUTION with a 2/3 rectangle blanked at r1c3, r1c6, r2c3, r2c6: it
# stalls immediately and has exactly two completions
TWO_WAY = "\n".join(["81.75.649", "94.68.175"] + HARD_SOLUTION[2:])

TWO_WAY_SWAPPED = ["813752649", "942683175"] + HARD_SOLUTION[2:]


@pytest.fixture
def two_way_text():
    return TWO_WAY


@pytest.fixture
def two_way_swapped():
    return rows_of(TWO_WAY_SWAPPED)
