"""Command-line plumbing shared by every day.

Each `aoc2022.days.dayNN.main` follows the same shape:

    @guarded(NN)
    def main(argv: list[str] | None = None) -> int:
        ap = build_parser(NN, "description")
        ap.add_argument(...)              # puzzle-specific flags
        args = parse_args(ap, NN, argv)   # config defaults + logging
        text = read_input(args.input)
        ...
        return report(answer)
"""

from __future__ import annotations

import argparse
import functools
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, TextIO

from .config import config_to_argv, day_section, default_config_path
from .constants import MODES
from .errors import PuzzleInputError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser(day: int, description: str, *, with_mode: bool = True) -> argparse.ArgumentParser:
    """Return a parser carrying the flags every day understands."""
    ap = argparse.ArgumentParser(prog=f"aoc2022-day{day:02d}", description=description)
    if with_mode:
        ap.add_argument(
            "-m",
            "--mode",
            type=str,
            required=True,
            choices=list(MODES),
            help="Puzzle variant to solve.",
        )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics (stderr) and dump state (stdout).")
    ap.add_argument("-i", "--input", type=Path, default=None, help="Read puzzle input from a file instead of stdin.")
    ap.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file.")
    ap.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON/YAML file with default flags (defaults to configs/day{day:02d}.json when present).",
    )
    ap.add_argument("--no-config", action="store_true", help="Disable loading the default config (if any).")
    return ap


def config_args(day: int, argv: list[str]) -> list[str]:
    """Resolve `--config/--no-config` and return the config-derived tokens."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    pre.add_argument("--no-config", action="store_true")
    pre_args, _ = pre.parse_known_args(argv)

    if pre_args.no_config and pre_args.config is not None:
        raise SystemExit("Use either --config or --no-config, not both.")
    if pre_args.no_config:
        return []
    config_path = pre_args.config or default_config_path(f"{day_section(day)}.json")
    if config_path is None:
        return []
    if not config_path.is_file():
        raise SystemExit(f"Config not found: {config_path}")
    return config_to_argv(config_path, section_keys=(day_section(day),))


def parse_args(ap: argparse.ArgumentParser, day: int, argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse `argv` (default `sys.argv[1:]`) with config defaults prepended.

    Also configures logging: DEBUG with `--verbose`, WARNING otherwise, and a
    copy of the records in `--log-file` when given.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    args = ap.parse_args(config_args(day, argv) + argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    logger.debug("day %02d args: %s", day, vars(args))
    return args


def read_input(path: Path | None = None, stream: TextIO | None = None) -> str:
    """Read the whole puzzle input from `path`, or from `stream` (default stdin)."""
    if path is not None:
        return path.read_text(encoding="utf-8")
    return (sys.stdin if stream is None else stream).read()


def report(answer: object) -> int:
    """Print the answer on stdout and return the success exit code."""
    print(answer)
    return 0


def guarded(day: int) -> Callable[[Callable[..., int]], Callable[..., int]]:
    """Turn `PuzzleInputError` raised by a day's `main` into a clean CLI failure.

    The message goes to stderr and the exit status is 1 (via `SystemExit`).
    """

    def decorate(fn: Callable[..., int]) -> Callable[..., int]:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs) -> int:
            try:
                return fn(*args, **kwargs)
            except PuzzleInputError as exc:
                raise SystemExit(f"day{day:02d}: {exc}") from exc

        return wrapper

    return decorate
