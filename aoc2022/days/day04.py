"""Day 4: Camp Cleanup."""

from __future__ import annotations

import re

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

_PAIR = re.compile(r"(\d+)-(\d+),(\d+)-(\d+)")

Range = tuple[int, int]


def parse_pairs(text: str) -> list[tuple[Range, Range]]:
    pairs = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        m = _PAIR.fullmatch(line)
        if m is None:
            raise PuzzleInputError(f"expected 'a-b,c-d', got {line!r}", line=lineno)
        a, b, c, d = map(int, m.groups())
        pairs.append(((a, b), (c, d)))
    return pairs


def fully_contains(r1: Range, r2: Range) -> bool:
    return (r1[0] <= r2[0] and r2[1] <= r1[1]) or (r2[0] <= r1[0] and r1[1] <= r2[1])


def overlaps(r1: Range, r2: Range) -> bool:
    return r1[0] <= r2[1] and r2[0] <= r1[1]


@guarded(4)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(4, "Count assignment pairs that contain or overlap each other.")
    args = parse_args(ap, 4, argv)
    check = fully_contains if args.mode == PART1 else overlaps
    return report(sum(check(r1, r2) for r1, r2 in parse_pairs(read_input(args.input))))


if __name__ == "__main__":
    raise SystemExit(main())
