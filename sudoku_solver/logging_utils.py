"""Logging setup shared by the whole sudoku_solver package."""

from __future__ import annotations

import logging

# Logger name shared by every module of the package
LOGGER_NAME = "sudoku_solver"


def get_logger() -> logging.Logger:
    """
    Return the package-wide logger.

    If no handler is attached yet, log INFO and above to the console.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def set_level(level: str | int) -> None:
    logger = get_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(level)
