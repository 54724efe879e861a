# tests/test_search.py
import logging

from sudoku_solver.config import SolverConfig
from sudoku_solver.parser import parse_grid, parse_puzzle
from sudoku_solver.search import SudokuSolver, solve_puzzle, solve_with_guesses
from sudoku_solver.snapshots import SnapshotWriter
from sudoku_solver.solver_core import Cell, Puzzle
from sudoku_solver.status import IllDefined, NumberRepeatsInRow, Solved, Unsolved, status


def is_valid_solution(rows):
    digits = set(range(1, 10))
    if any(set(row) != digits for row in rows):
        return False
    if any({rows[r][c] for r in range(9)} != digits for c in range(9)):
        return False
    for br in range(3):
        for bc in range(3):
            box = {rows[3 * br + i][3 * bc + j] for i in range(3) for j in range(3)}
            if box != digits:
                return False
    return True


def stalled_top_row(hard_solution, options):
    """Solved grid with r1c1 and r1c2 blanked; r1c2 carries the given (possibly stale) candidates."""
    p = parse_grid(hard_solution)
    p.cells[0][0] = Cell(candidates={8})
    p.cells[0][1] = Cell(candidates=set(options))
    return p


def test_step_keeps_resolved_cells_candidate_free(sample_text):
    solver = SudokuSolver(parse_puzzle(sample_text))
    moves = solver.step()
    assert solver.iteration == 1
    assert moves
    for r, c in solver.puzzle.coords():
        cell = solver.puzzle.cells[r][c]
        if cell.resolved:
            assert cell.candidates == set()


def test_sample_is_solved(sample_text):
    original = parse_puzzle(sample_text)
    result = solve_puzzle(sample_text)
    assert result.status == Solved()
    rows = result.puzzle.to_rows()
    assert is_valid_solution(rows)
    for r, c in original.coords():
        if original.cells[r][c].given:
            assert rows[r][c] == original.cells[r][c].value


def test_hard_puzzle_stalls_without_guessing(hard_text):
    result = solve_puzzle(hard_text, SolverConfig(use_guessing=False))
    assert result.status == Unsolved()
    assert result.guesses == 0
    assert not result.exhausted


def test_stalled_puzzle_is_finished_by_guessing(two_way_text, two_way_swapped):
    stalled = solve_puzzle(two_way_text, SolverConfig(use_guessing=False))
    assert stalled.status == Unsolved()
    assert stalled.puzzle.cell(1, 5).candidates == {2, 3}

    result = solve_puzzle(two_way_text)
    assert result.status == Solved()
    # pivot is r2c6 (last open cell) and 3 is tried before 2
    assert result.puzzle.to_rows() == two_way_swapped
    assert result.guesses == 1
    assert not result.exhausted


def test_solve_puzzle_does_not_mutate_its_input(two_way_text):
    p = parse_puzzle(two_way_text)
    before = p.to_rows()
    solve_puzzle(p)
    assert p.to_rows() == before


def test_guesses_are_tried_in_reverse_and_first_solution_wins(hard_solution):
    p = stalled_top_row(hard_solution, [1, 2])
    solver = SudokuSolver(p)
    result = solver.solve_with_guesses()
    assert result is not None
    assert status(result) == Solved()
    assert result.to_rows() == hard_solution
    # 2 is tried first and fails, then 1 succeeds
    assert solver.guesses == 2
    assert p.cell(0, 1).value is None
    assert p.cell(0, 0).value is None


def test_guess_search_exhausts_to_none(hard_solution):
    p = stalled_top_row(hard_solution, [2, 3])
    assert solve_with_guesses(p) is None
    assert p.cell(0, 1).value is None
    assert p.cell(0, 1).candidates == {2, 3}


def test_pivot_is_last_unresolved_cell_with_candidates(hard_solution):
    p = stalled_top_row(hard_solution, [1, 2])
    p.cells[8][8] = Cell()
    assert SudokuSolver(p).pick_pivot() == (0, 1, [1, 2])
    p.cells[8][8] = Cell(candidates={2})
    assert SudokuSolver(p).pick_pivot() == (8, 8, [2])


def test_repeated_givens_stop_the_loop():
    result = solve_puzzle("11.......")
    assert result.status == IllDefined(NumberRepeatsInRow(1, 0))
    assert result.steps == 1


def test_observer_sees_labelled_snapshots_without_changing_the_outcome(sample_text):
    seen = []
    no_guess = SolverConfig(use_guessing=False)
    observed = solve_puzzle(sample_text, no_guess, observer=lambda label, text: seen.append((label, text)))
    plain = solve_puzzle(sample_text, no_guess)
    assert observed.puzzle.to_rows() == plain.puzzle.to_rows()
    assert observed.steps == plain.steps
    assert [label for label, _ in seen[:2]] == ["step-1-candidates", "step-1-consolidated"]
    assert "Last consolidation" in seen[1][1]
    assert len(seen) == 2 * plain.steps


def test_snapshot_writer_writes_one_file_per_label(tmp_path, sample_text):
    writer = SnapshotWriter(tmp_path / "snaps")
    result = solve_puzzle(sample_text, SolverConfig(use_guessing=False), observer=writer)
    assert (tmp_path / "snaps" / "step-1-candidates").exists()
    assert (tmp_path / "snaps" / f"step-{result.steps}-consolidated").exists()
    assert len(writer.written) == 2 * result.steps


def test_guess_branches_prefix_their_snapshot_labels(hard_solution):
    labels = []
    p = stalled_top_row(hard_solution, [1, 2])
    SudokuSolver(p, observer=lambda label, text: labels.append(label)).solve_with_guesses()
    # 2 is tried first (b1), then 1 (b2)
    assert labels[0] == "b1-step-1-candidates"
    assert "b2-step-1-consolidated" in labels


def test_deep_guess_search_with_snapshot_files_matches_plain_run(tmp_path):
    blank = Puzzle()
    plain = solve_puzzle(blank)
    snaps = tmp_path / "snaps"
    observed = solve_puzzle(blank, SolverConfig(snapshot_dir=str(snaps)))
    assert plain.status == Solved()
    assert observed.status == plain.status
    assert observed.puzzle.to_rows() == plain.puzzle.to_rows()
    assert observed.guesses == plain.guesses > 20
    names = [p.name for p in snaps.iterdir()]
    assert len(names) == 2 * observed.steps
    assert max(len(n) for n in names) < 64


def test_steps_count_work_inside_guess_branches(two_way_text):
    stalled = solve_puzzle(two_way_text, SolverConfig(use_guessing=False))
    solved = solve_puzzle(two_way_text)
    assert solved.steps > stalled.steps


def test_guesses_log_at_info_but_step_progress_does_not(caplog, two_way_text):
    with caplog.at_level(logging.INFO, logger="sudoku_solver"):
        solve_puzzle(two_way_text)
    messages = [r.getMessage() for r in caplog.records]
    assert "Guess b1 (depth 1): r2c6 = 3" in messages
    assert not any("progressed by" in m for m in messages)
