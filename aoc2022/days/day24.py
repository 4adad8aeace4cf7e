"""Day 24: Blizzard Basin.

Blizzards move independently and wrap around the valley, so the blizzard
state at minute t is each direction's initial layer rolled by t. The search
keeps the set of reachable cells per minute as a boolean array.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

BLIZZARDS = ">v<^"


class Valley:
    """Inner area of the valley (walls stripped) with its blizzard layers."""

    def __init__(self, layers: dict[str, np.ndarray], start_col: int, goal_col: int) -> None:
        self.layers = layers
        self.height, self.width = layers[">"].shape
        self.start_col = start_col
        self.goal_col = goal_col
        self.period = math.lcm(self.height, self.width)

    def blocked(self, minute: int) -> np.ndarray:
        return (
            np.roll(self.layers[">"], minute, axis=1)
            | np.roll(self.layers["<"], -minute, axis=1)
            | np.roll(self.layers["v"], minute, axis=0)
            | np.roll(self.layers["^"], -minute, axis=0)
        )

    @property
    def top(self) -> tuple[int, int]:
        return 0, self.start_col

    @property
    def bottom(self) -> tuple[int, int]:
        return self.height - 1, self.goal_col


def parse_valley(text: str) -> Valley:
    lines = [line.rstrip() for line in text.splitlines() if line.strip()]
    if len(lines) < 3:
        raise PuzzleInputError("the valley needs at least one row between its walls")
    width = len(lines[0]) - 2
    if width < 1 or any(len(line) != width + 2 for line in lines):
        raise PuzzleInputError("valley rows must all have the same length")
    if lines[0].count(".") != 1 or lines[-1].count(".") != 1:
        raise PuzzleInputError("the top and bottom walls need exactly one gap each")
    start_col = lines[0].index(".") - 1
    goal_col = lines[-1].index(".") - 1

    inner = np.array([list(line[1:-1]) for line in lines[1:-1]])
    for lineno, line in enumerate(lines[1:-1], start=2):
        if line[0] != "#" or line[-1] != "#" or set(line[1:-1]) - set(BLIZZARDS + "."):
            raise PuzzleInputError(f"malformed valley row {line!r}", line=lineno)
    layers = {ch: inner == ch for ch in BLIZZARDS}
    if layers["v"][:, start_col].any() or layers["^"][:, goal_col].any():
        logger.warning("vertical blizzards in the entrance columns will blow into the walls")
    return Valley(layers, start_col, goal_col)


def crossing(valley: Valley, minute: int, entry: tuple[int, int], exit_: tuple[int, int]) -> int:
    """Minute at which the far side is reached when leaving at `minute`.

    `entry` and `exit_` are the valley cells next to the departure and
    arrival gaps. Waiting in the departure gap is always allowed.
    """
    reachable = np.zeros((valley.height, valley.width), dtype=bool)
    seen: set[tuple[int, bytes]] = set()
    while True:
        minute += 1
        if reachable[exit_]:
            return minute
        spread = reachable.copy()
        spread[1:, :] |= reachable[:-1, :]
        spread[:-1, :] |= reachable[1:, :]
        spread[:, 1:] |= reachable[:, :-1]
        spread[:, :-1] |= reachable[:, 1:]
        spread[entry] = True
        reachable = spread & ~valley.blocked(minute)
        key = (minute % valley.period, reachable.tobytes())
        if key in seen:
            raise PuzzleInputError("the far side of the valley cannot be reached")
        seen.add(key)


def fewest_minutes(valley: Valley, trips: int) -> int:
    """Minutes for `trips` crossings, alternating direction, starting at the top."""
    minute = 0
    ends = (valley.top, valley.bottom)
    for trip in range(trips):
        entry, exit_ = ends if trip % 2 == 0 else ends[::-1]
        minute = crossing(valley, minute, entry, exit_)
        logger.debug("trip %d done at minute %d", trip + 1, minute)
    return minute


@guarded(24)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(24, "Fewest minutes to cross the blizzard valley.")
    args = parse_args(ap, 24, argv)
    valley = parse_valley(read_input(args.input))
    return report(fewest_minutes(valley, 1 if args.mode == PART1 else 3))


if __name__ == "__main__":
    raise SystemExit(main())
