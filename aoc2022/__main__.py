"""Dispatcher: `python -m aoc2022 DAY [day flags...]`.

Everything after the day number is handed to that day's own CLI, e.g.

    python -m aoc2022 14 --mode part2 -i input14.txt
"""

from __future__ import annotations

import argparse
import sys

from .constants import FIRST_DAY, LAST_DAY
from .days import load_day


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="aoc2022", description="Run an Advent of Code 2022 puzzle solver.")
    ap.add_argument("day", type=int, help=f"Puzzle day ({FIRST_DAY}-{LAST_DAY}).")
    ap.add_argument("rest", nargs=argparse.REMAINDER, help="Flags for the selected day (see `aoc2022 DAY --help`).")
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        module = load_day(args.day)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    return int(module.main(args.rest))


if __name__ == "__main__":
    raise SystemExit(main())
