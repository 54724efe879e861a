"""Solver configuration: YAML loading, CLI overrides, and resolved defaults."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Read a YAML mapping of solver settings; an empty file gives {}."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of solver settings, got {type(data).__name__}")
    return data


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    # None means the option was not given on the command line
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg


@dataclass
class SolverConfig:
    use_guessing: bool = True  # run the backtracking search when propagation stalls
    snapshot_dir: str | None = None  # write step snapshots here when set
    log_snapshots: bool = False  # forward step snapshots to the debug log
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SolverConfig:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Defaults <- optional YAML file <- non-None overrides."""
    cfg: Dict[str, Any] = {}
    if path:
        cfg.update(load_yaml(path))
    cfg = merge_overrides(cfg, **overrides)
    return SolverConfig.from_dict(cfg)
