"""Day 3: Rucksack Reorganization."""

from __future__ import annotations

import string

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

PRIORITY = {ch: i for i, ch in enumerate(string.ascii_lowercase + string.ascii_uppercase, start=1)}


def parse_rucksacks(text: str) -> list[str]:
    sacks = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        if any(ch not in PRIORITY for ch in line):
            raise PuzzleInputError(f"items must be ASCII letters: {line!r}", line=lineno)
        sacks.append(line)
    return sacks


def common_item(*parts: str) -> str:
    shared = set(parts[0]).intersection(*parts[1:])
    if len(shared) != 1:
        raise PuzzleInputError(f"expected exactly one common item in {parts!r}, found {sorted(shared)}")
    return shared.pop()


def misplaced_priority(sacks: list[str]) -> int:
    total = 0
    for sack in sacks:
        if len(sack) % 2:
            raise PuzzleInputError(f"rucksack {sack!r} has an odd number of items")
        half = len(sack) // 2
        total += PRIORITY[common_item(sack[:half], sack[half:])]
    return total


def badge_priority(sacks: list[str]) -> int:
    if len(sacks) % 3:
        raise PuzzleInputError(f"{len(sacks)} rucksacks cannot be split into groups of three")
    return sum(PRIORITY[common_item(*sacks[i : i + 3])] for i in range(0, len(sacks), 3))


@guarded(3)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(3, "Priorities of misplaced items and group badges.")
    args = parse_args(ap, 3, argv)
    sacks = parse_rucksacks(read_input(args.input))
    return report(misplaced_priority(sacks) if args.mode == PART1 else badge_priority(sacks))


if __name__ == "__main__":
    raise SystemExit(main())
