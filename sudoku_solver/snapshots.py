"""Debug sinks for the per-step snapshots the solver offers (label, text)."""

# snapshots.py
# Observers never influence solving; a solver without one behaves identically.
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .logging_utils import get_logger

Observer = Callable[[str, str], None]

logger = get_logger()


class SnapshotWriter:
    """Write each snapshot to <out_dir>/<label>, e.g. tmp/step-3-candidates or tmp/b12-step-1-consolidated."""

    def __init__(self, out_dir: str | Path = "tmp"):
        self.out_dir = Path(out_dir)
        self.written: list[Path] = []

    def __call__(self, label: str, text: str) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        path = self.out_dir / label
        path.write_text(text, encoding="utf-8")
        self.written.append(path)


class LoggingObserver:
    def __init__(self, level: int = logging.INFO):
        self.level = level

    def __call__(self, label: str, text: str) -> None:
        logger.log(self.level, "Snapshot %s:%s", label, text)


def fan_out(*observers: Observer | None) -> Observer | None:
    """Combine observers; None entries are dropped, and no observers gives None."""
    active = [o for o in observers if o is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]

    def notify(label: str, text: str) -> None:
        for o in active:
            o(label, text)

    return notify


def observer_from_config(cfg) -> Observer | None:
    """Build the snapshot sink described by a SolverConfig (None when snapshots are off)."""
    return fan_out(
        SnapshotWriter(cfg.snapshot_dir) if cfg.snapshot_dir else None,
        LoggingObserver() if cfg.log_snapshots else None,
    )
