"""Day 1: Calorie Counting."""

from __future__ import annotations

import heapq
import logging

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)


def parse_groups(text: str) -> list[list[int]]:
    """Split blank-line separated blocks of integers."""
    groups: list[list[int]] = []
    current: list[int] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            if current:
                groups.append(current)
                current = []
            continue
        try:
            current.append(int(line))
        except ValueError as exc:
            raise PuzzleInputError(f"expected an integer, got {line!r}", line=lineno) from exc
    if current:
        groups.append(current)
    if not groups:
        raise PuzzleInputError("no calorie groups in input")
    return groups


def top_total(groups: list[list[int]], n: int = 1) -> int:
    """Sum of the `n` largest group totals."""
    return sum(heapq.nlargest(n, (sum(g) for g in groups)))


@guarded(1)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(1, "Total calories carried by the best-stocked elves.")
    args = parse_args(ap, 1, argv)
    groups = parse_groups(read_input(args.input))
    logger.debug("%d elves", len(groups))
    return report(top_total(groups, 1 if args.mode == PART1 else 3))


if __name__ == "__main__":
    raise SystemExit(main())
