"""Registry of puzzle modules (`aoc2022.days.day01` ... `day25`)."""

from __future__ import annotations

import importlib
from types import ModuleType

from ..constants import FIRST_DAY, LAST_DAY

DAYS: tuple[int, ...] = tuple(range(FIRST_DAY, LAST_DAY + 1))


def module_name(day: int) -> str:
    return f"{__name__}.day{day:02d}"


def load_day(day: int) -> ModuleType:
    """Import the module solving `day`.

    Raises:
        ValueError: If `day` is not an Advent of Code 2022 day.
    """
    if day not in DAYS:
        raise ValueError(f"day must be in [{FIRST_DAY}, {LAST_DAY}], got {day}")
    return importlib.import_module(module_name(day))
