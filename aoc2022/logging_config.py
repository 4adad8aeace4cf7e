"""
Logging Configuration
Sets up the package logger used by every puzzle solver.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .constants import LOG_DATEFMT, LOG_FORMAT


def setup_logging(level: int = logging.WARNING, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configures the logger for the 'aoc2022' namespace.

    Answers are printed on stdout, so log records go to stderr.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("aoc2022")
    logger.setLevel(level)

    # Replace handlers so repeated calls (tests, dispatcher) do not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
