"""Day 13: Distress Signal."""

from __future__ import annotations

import functools
import json
import math
from typing import Union

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

Packet = Union[int, list["Packet"]]

DIVIDERS: tuple[Packet, ...] = ([[2]], [[6]])


def parse_packets(text: str) -> list[Packet]:
    packets = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            packet = json.loads(line)
        except json.JSONDecodeError as exc:
            raise PuzzleInputError(f"invalid packet {line!r}", line=lineno) from exc
        if not isinstance(packet, list):
            raise PuzzleInputError(f"a packet must be a list, got {line!r}", line=lineno)
        packets.append(packet)
    return packets


def compare(left: Packet, right: Packet) -> int:
    """Negative when `left` comes first, positive when `right` does, 0 when tied."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def ordered_pairs_sum(packets: list[Packet]) -> int:
    if len(packets) % 2:
        raise PuzzleInputError(f"{len(packets)} packets do not form pairs")
    return sum(i for i, k in enumerate(range(0, len(packets), 2), start=1) if compare(packets[k], packets[k + 1]) < 0)


def decoder_key(packets: list[Packet]) -> int:
    ordered = sorted([*packets, *DIVIDERS], key=functools.cmp_to_key(compare))
    return math.prod(ordered.index(divider) + 1 for divider in DIVIDERS)


@guarded(13)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(13, "Order distress-signal packets.")
    args = parse_args(ap, 13, argv)
    packets = parse_packets(read_input(args.input))
    return report(ordered_pairs_sum(packets) if args.mode == PART1 else decoder_key(packets))


if __name__ == "__main__":
    raise SystemExit(main())
