"""Day 2: Rock Paper Scissors."""

from __future__ import annotations

from ..constants import PART1, Mode
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

# shapes are 0 rock, 1 paper, 2 scissors; shape k beats shape (k - 1) % 3
_THEIRS = {"A": 0, "B": 1, "C": 2}
_OURS = {"X": 0, "Y": 1, "Z": 2}


def round_score(theirs: int, ours: int) -> int:
    outcome = (ours - theirs + 1) % 3  # 0 lose, 1 draw, 2 win
    return ours + 1 + 3 * outcome


def parse_rounds(text: str) -> list[tuple[int, int]]:
    rounds = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2 or fields[0] not in _THEIRS or fields[1] not in _OURS:
            raise PuzzleInputError(f"expected 'A|B|C X|Y|Z', got {line!r}", line=lineno)
        rounds.append((_THEIRS[fields[0]], _OURS[fields[1]]))
    return rounds


def total_score(rounds: list[tuple[int, int]], mode: Mode) -> int:
    """Score the strategy guide.

    In part 1 the second column is our shape; in part 2 it is the desired
    outcome (X lose, Y draw, Z win) and our shape is derived from it.
    """
    total = 0
    for theirs, column in rounds:
        ours = column if mode == PART1 else (theirs + column - 1) % 3
        total += round_score(theirs, ours)
    return total


@guarded(2)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(2, "Total score of a rock-paper-scissors strategy guide.")
    args = parse_args(ap, 2, argv)
    return report(total_score(parse_rounds(read_input(args.input)), args.mode))


if __name__ == "__main__":
    raise SystemExit(main())
