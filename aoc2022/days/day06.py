"""Day 6: Tuning Trouble."""

from __future__ import annotations

from collections import Counter

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

PACKET_MARKER = 4
MESSAGE_MARKER = 14


def find_marker(stream: str, width: int) -> int:
    """Number of characters read when the last `width` of them are all distinct."""
    window: Counter[str] = Counter()
    for i, ch in enumerate(stream):
        window[ch] += 1
        if i >= width:
            old = stream[i - width]
            window[old] -= 1
            if not window[old]:
                del window[old]
        if len(window) == width:
            return i + 1
    raise PuzzleInputError(f"no run of {width} distinct characters in the datastream")


@guarded(6)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(6, "Position of the first start-of-packet or start-of-message marker.")
    args = parse_args(ap, 6, argv)
    stream = read_input(args.input).strip()
    return report(find_marker(stream, PACKET_MARKER if args.mode == PART1 else MESSAGE_MARKER))


if __name__ == "__main__":
    raise SystemExit(main())
