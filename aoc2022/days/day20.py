"""Day 20: Grove Positioning System."""

from __future__ import annotations

import logging

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

DECRYPTION_KEY = 811589153
GROVE_OFFSETS = (1000, 2000, 3000)


def parse_numbers(text: str) -> list[int]:
    numbers = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            numbers.append(int(line))
        except ValueError as exc:
            raise PuzzleInputError(f"expected an integer, got {line!r}", line=lineno) from exc
    if numbers.count(0) != 1:
        raise PuzzleInputError(f"the file must contain exactly one 0, found {numbers.count(0)}")
    return numbers


def mix(numbers: list[int], rounds: int = 1) -> list[int]:
    """Move every number (in original order) forward or back by its own value.

    The sequence is circular; a number moving past the end takes `n - 1`
    steps to come around because it is not counted itself.
    """
    n = len(numbers)
    order = list(range(n))
    if n > 1:
        for rnd in range(rounds):
            for i, value in enumerate(numbers):
                pos = order.index(i)
                order.pop(pos)
                order.insert((pos + value) % (n - 1), i)
            logger.debug("mixed round %d", rnd + 1)
    return [numbers[i] for i in order]


def grove_coordinates(mixed: list[int]) -> int:
    zero = mixed.index(0)
    return sum(mixed[(zero + offset) % len(mixed)] for offset in GROVE_OFFSETS)


@guarded(20)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(20, "Decrypt the grove coordinates.")
    args = parse_args(ap, 20, argv)
    numbers = parse_numbers(read_input(args.input))
    if args.mode == PART1:
        return report(grove_coordinates(mix(numbers)))
    return report(grove_coordinates(mix([v * DECRYPTION_KEY for v in numbers], rounds=10)))


if __name__ == "__main__":
    raise SystemExit(main())
