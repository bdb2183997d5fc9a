"""Logging utilities for the five-word search."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Send all ``fivewords`` logging to stderr with a timestamped formatter.

    The CLI prints combinations and the ``Found N ...`` summary on stdout, so
    ``main.py words.txt > results.txt`` captures results only while per-level
    progress, rejected-word debug lines and cross-check outcomes stay on the
    terminal. Any handlers already on the root logger are replaced.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "fivewords")
