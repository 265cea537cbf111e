"""Logging setup for the arrivals board."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

from cta_board.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "cta_board.log"


def configure_logging(config: LoggingConfig) -> None:
    """Log to stderr, and to ``<log_dir>/cta_board.log`` when a log dir is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8"))

    logging.basicConfig(level=config.level, format=LOG_FORMAT, handlers=handlers, force=True)


__all__ = ["LOG_FILE_NAME", "LOG_FORMAT", "configure_logging"]
