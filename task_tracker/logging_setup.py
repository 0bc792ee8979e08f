"""Logging configuration for the task-tracker CLI."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "task_tracker"


def setup_logging(
    level: Union[int, str] = logging.WARNING, log_file: Optional[Path] = None
) -> logging.Logger:
    """Configure the package logger for one CLI invocation.

    Args:
        level: Logging level (number or name such as "DEBUG")
        log_file: Optional file to write logs to

    Returns:
        Configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
