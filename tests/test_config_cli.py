# tests/test_config_cli.py
import json
import logging

import pytest

from apps.cli.solve_cli import build_parser, main
from sudoku_solver.config import SolverConfig, load_config, load_yaml, merge_overrides
from sudoku_solver.snapshots import LoggingObserver, SnapshotWriter, observer_from_config


def test_defaults():
    cfg = load_config()
    assert cfg == SolverConfig()
    assert cfg.use_guessing is True
    assert cfg.snapshot_dir is None


def test_yaml_then_overrides(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("use_guessing: false\nlog_level: DEBUG\nunknown_key: 3\n", encoding="utf-8")
    assert load_yaml(path)["log_level"] == "DEBUG"
    cfg = load_config(path, log_level="WARNING", snapshot_dir=None)
    assert cfg.use_guessing is False
    assert cfg.log_level == "WARNING"
    assert cfg.snapshot_dir is None


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("- use_guessing\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_merge_overrides_skips_none():
    assert merge_overrides({"a": 1}, a=None, b=2) == {"a": 1, "b": 2}


def test_observer_from_config(tmp_path):
    assert observer_from_config(SolverConfig()) is None
    assert isinstance(observer_from_config(SolverConfig(snapshot_dir=str(tmp_path))), SnapshotWriter)
    assert isinstance(observer_from_config(SolverConfig(log_snapshots=True)), LoggingObserver)
    both = observer_from_config(SolverConfig(snapshot_dir=str(tmp_path), log_snapshots=True))
    both("step-1-candidates", "board")
    assert (tmp_path / "step-1-candidates").read_text(encoding="utf-8") == "board"


def test_logged_snapshots_show_at_the_default_level(caplog):
    observer = observer_from_config(SolverConfig(log_snapshots=True))
    with caplog.at_level(logging.INFO, logger="sudoku_solver"):
        observer("step-1-candidates", "board")
    assert [r.getMessage() for r in caplog.records] == ["Snapshot step-1-candidates:board"]


def test_cli_solves_and_exits_zero(tmp_path, capsys, sample_text):
    puzzle = tmp_path / "puzzle.txt"
    puzzle.write_text(sample_text, encoding="utf-8")
    code = main(build_parser().parse_args([str(puzzle)]))
    out = capsys.readouterr().out
    assert code == 0
    assert "Solved!" in out
    assert "-" * 121 in out


def test_cli_without_guessing_reports_incomplete(tmp_path, capsys, two_way_text):
    puzzle = tmp_path / "puzzle.txt"
    puzzle.write_text(two_way_text, encoding="utf-8")
    snaps = tmp_path / "snaps"
    code = main(build_parser().parse_args([str(puzzle), "--no-guess", "--snapshots", str(snaps), "--json"]))
    payload = json.loads(capsys.readouterr().out)
    assert code == 2
    assert payload["signal"] == "incomplete"
    assert payload["status"] == {"status": "unsolved"}
    assert payload["candidates"]["r1c3"] == [2, 3]
    assert (snaps / "step-1-consolidated").exists()


def test_cli_reports_ill_defined(tmp_path, capsys):
    puzzle = tmp_path / "puzzle.txt"
    puzzle.write_text("11.......\n", encoding="utf-8")
    code = main(build_parser().parse_args([str(puzzle)]))
    assert code == 1
    assert "Ill-defined" in capsys.readouterr().out
