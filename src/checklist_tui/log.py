"""Logging setup for the checklist-tui package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "checklist_tui"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    log_file: Optional[Path] = None,
    level: Union[str, int] = logging.INFO,
) -> logging.Logger:
    """
    Configure the package logger and return it.

    The TUI owns stdout while it runs, so records only ever go to a file.
    Without a log file the logger gets a NullHandler and stays silent.

    Args:
        log_file: Destination file, created (with parent dirs) if missing
        level: Logging level name or number
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    # Replace handlers from a previous call instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return logger
