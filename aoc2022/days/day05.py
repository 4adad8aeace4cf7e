"""Day 5: Supply Stacks.

The input is a crate drawing followed by a blank line and `move N from A to B`
instructions. Stacks are numbered from 1 in the drawing; the crate letter of
stack k sits at column `4 * (k - 1) + 1`.
"""

from __future__ import annotations

import logging
import re

from ..constants import PART1, Mode
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

_MOVE = re.compile(r"move (\d+) from (\d+) to (\d+)")

Move = tuple[int, int, int]


def parse_drawing(lines: list[str]) -> list[list[str]]:
    """Stacks listed bottom to top; the last drawing line holds the stack numbers."""
    if not lines:
        raise PuzzleInputError("missing crate drawing")
    labels = lines[-1].split()
    if not labels or not all(label.isdigit() for label in labels):
        raise PuzzleInputError(f"expected stack numbers, got {lines[-1]!r}", line=len(lines))
    stacks: list[list[str]] = [[] for _ in labels]
    for lineno in range(len(lines) - 2, -1, -1):
        line = lines[lineno]
        for col, ch in enumerate(line):
            if ch != "[":
                continue
            index = col // 4
            if index >= len(stacks) or col + 2 >= len(line) or line[col + 2] != "]":
                raise PuzzleInputError(f"malformed crate at column {col + 1}", line=lineno + 1)
            stacks[index].append(line[col + 1])
    return stacks


def parse_input(text: str) -> tuple[list[list[str]], list[Move]]:
    lines = text.splitlines()
    split = next((i for i, line in enumerate(lines) if not line.strip()), None)
    if split is None:
        raise PuzzleInputError("expected a blank line between drawing and moves")
    stacks = parse_drawing(lines[:split])

    moves: list[Move] = []
    for lineno in range(split + 1, len(lines)):
        line = lines[lineno].strip()
        if not line:
            continue
        m = _MOVE.fullmatch(line)
        if m is None:
            raise PuzzleInputError(f"expected 'move N from A to B', got {line!r}", line=lineno + 1)
        count, src, dst = map(int, m.groups())
        if not (1 <= src <= len(stacks) and 1 <= dst <= len(stacks)):
            raise PuzzleInputError(f"no such stack in {line!r}", line=lineno + 1)
        moves.append((count, src - 1, dst - 1))
    return stacks, moves


def rearrange(stacks: list[list[str]], moves: list[Move], mode: Mode) -> str:
    """Apply `moves` (mutating `stacks`) and return the top crate of every stack.

    Part 1 moves crates one at a time (reversing their order); part 2 moves
    each batch at once.
    """
    for count, src, dst in moves:
        if count > len(stacks[src]):
            raise PuzzleInputError(f"cannot move {count} crates from stack {src + 1} holding {len(stacks[src])}")
        batch = stacks[src][len(stacks[src]) - count :]
        del stacks[src][len(stacks[src]) - count :]
        stacks[dst].extend(reversed(batch) if mode == PART1 else batch)
    for i, stack in enumerate(stacks, start=1):
        logger.debug("stack %d: %s", i, "".join(stack))
    return "".join(stack[-1] for stack in stacks if stack)


@guarded(5)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(5, "Top crates after the crane rearranges the stacks.")
    args = parse_args(ap, 5, argv)
    stacks, moves = parse_input(read_input(args.input))
    return report(rearrange(stacks, moves, args.mode))


if __name__ == "__main__":
    raise SystemExit(main())
