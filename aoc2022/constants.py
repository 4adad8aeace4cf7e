"""Project-wide constants.

These values are shared by the runner and every day module: the selectable
puzzle variants, the range of available days and logging defaults.
"""

from __future__ import annotations

from typing import Literal

Mode = Literal["part1", "part2"]

PART1: Mode = "part1"
PART2: Mode = "part2"
MODES: tuple[Mode, ...] = (PART1, PART2)

# Puzzle calendar.
FIRST_DAY: int = 1
LAST_DAY: int = 25

# Logging.
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
