"""Stderr logging setup; stdout carries launcher output only."""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger("fw")
    # Reinitialising from a second build() must not duplicate handlers.
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
