"""Command-line solver: read a puzzle, solve it, print the board and the outcome."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli puzzle.txt
#   cat puzzle.txt | python -m apps.cli.solve_cli --snapshots tmp --no-guess
#   python -m apps.cli.solve_cli puzzle.txt --config configs/default.yaml --json
#
# Exit code: 0 solved, 1 unsolvable, 2 stalled without an answer.

import argparse
import json
import sys

from sudoku_solver.config import load_config
from sudoku_solver.logging_utils import set_level
from sudoku_solver.parser import parse_puzzle
from sudoku_solver.render import display, internals
from sudoku_solver.report import exit_code_for, report_outcome
from sudoku_solver.search import solve_puzzle
from sudoku_solver.status import status_to_dict


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku given as text ('.' or any non-digit for blanks).")
    ap.add_argument("puzzle", nargs="?", type=argparse.FileType("r", encoding="utf-8"), default=None,
                    help="Puzzle file; reads stdin when omitted.")
    ap.add_argument("--config", type=str, default=None, help="YAML config (see configs/default.yaml).")
    ap.add_argument("--snapshots", type=str, default=None, dest="snapshot_dir",
                    help="Directory for step-N-candidates / step-N-consolidated snapshots.")
    ap.add_argument("--no-guess", action="store_false", dest="use_guessing", default=None,
                    help="Stop when propagation stalls instead of guessing.")
    ap.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ...")
    ap.add_argument("--internals", action="store_true", help="Also print the per-block cell listing.")
    ap.add_argument("--json", action="store_true", help="Print a JSON payload instead of the board.")
    return ap


def main(args) -> int:
    cfg = load_config(
        args.config,
        snapshot_dir=args.snapshot_dir,
        use_guessing=args.use_guessing,
        log_level=args.log_level,
    )
    set_level(cfg.log_level)

    src = args.puzzle or sys.stdin
    text = src.read()
    puzzle = parse_puzzle(text)
    result = solve_puzzle(puzzle, cfg)
    outcome = report_outcome(result.status, result.exhausted)

    if args.json:
        payload = {
            "original": puzzle.to_rows(),
            "solution": result.puzzle.to_rows(),
            "candidates": result.puzzle.candidates_map(),
            "status": status_to_dict(result.status),
            "steps": result.steps,
            "guesses": result.guesses,
            "signal": outcome.signal,
            "message": outcome.message,
        }
        print(json.dumps(payload, indent=2))
    else:
        if args.internals:
            print(internals(result.puzzle))
        print(display(result.puzzle))
        print(outcome.message)
    return exit_code_for(outcome)


def cli() -> None:
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
