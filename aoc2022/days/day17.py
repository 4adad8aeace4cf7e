"""Day 17: Pyroclastic Flow.

The chamber is seven units wide, so each row is a 7-bit mask (bit 6 is the
left wall side). Rocks are lists of row masks, bottom row first, already
placed two units from the left wall.
"""

from __future__ import annotations

import logging

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

WIDTH = 7
FULL_ROW = (1 << WIDTH) - 1
LEFT_EDGE = 1 << (WIDTH - 1)
ROCKS: tuple[tuple[int, ...], ...] = (
    (0b0011110,),
    (0b0001000, 0b0011100, 0b0001000),
    (0b0011100, 0b0000100, 0b0000100),
    (0b0010000, 0b0010000, 0b0010000, 0b0010000),
    (0b0011000, 0b0011000),
)
PART1_ROCKS = 2022
PART2_ROCKS = 1_000_000_000_000
# rows of the tower surface included in the cycle-detection key
PROFILE_DEPTH = 30


def parse_jets(text: str) -> list[int]:
    """`-1` for `<`, `+1` for `>`."""
    pattern = text.strip()
    if not pattern:
        raise PuzzleInputError("empty jet pattern")
    bad = set(pattern) - {"<", ">"}
    if bad:
        raise PuzzleInputError(f"unexpected jet characters {sorted(bad)}")
    return [-1 if ch == "<" else 1 for ch in pattern]


def _push(rock: list[int], direction: int) -> list[int] | None:
    if direction < 0:
        if any(row & LEFT_EDGE for row in rock):
            return None
        return [row << 1 for row in rock]
    if any(row & 1 for row in rock):
        return None
    return [row >> 1 for row in rock]


def _fits(tower: list[int], rock: list[int], bottom: int) -> bool:
    if bottom < 0:
        return False
    return all(bottom + i >= len(tower) or not tower[bottom + i] & row for i, row in enumerate(rock))


class Chamber:
    """Falling-rock simulation; `tower[i]` is the mask of row `i` from the floor."""

    def __init__(self, jets: list[int]) -> None:
        self.jets = jets
        self.jet_index = 0
        self.rock_index = 0
        self.tower: list[int] = []

    @property
    def height(self) -> int:
        return len(self.tower)

    def drop(self) -> None:
        rock = list(ROCKS[self.rock_index])
        self.rock_index = (self.rock_index + 1) % len(ROCKS)
        bottom = self.height + 3
        while True:
            pushed = _push(rock, self.jets[self.jet_index])
            self.jet_index = (self.jet_index + 1) % len(self.jets)
            if pushed is not None and _fits(self.tower, pushed, bottom):
                rock = pushed
            if not _fits(self.tower, rock, bottom - 1):
                break
            bottom -= 1
        for i, row in enumerate(rock):
            if bottom + i == len(self.tower):
                self.tower.append(0)
            self.tower[bottom + i] |= row

    def state(self) -> tuple[int, int, tuple[int, ...]]:
        return self.rock_index, self.jet_index, tuple(self.tower[-PROFILE_DEPTH:])

    def render(self, rows: int = 20) -> str:
        lines = []
        for row in reversed(self.tower[-rows:]):
            lines.append("|" + "".join("#" if row & (1 << bit) else "." for bit in range(WIDTH - 1, -1, -1)) + "|")
        if rows >= self.height:
            lines.append("+" + "-" * WIDTH + "+")
        return "\n".join(lines)


def tower_height(jets: list[int], rocks: int, *, dump: bool = False) -> int:
    """Height after `rocks` rocks, skipping ahead once the simulation repeats.

    With `dump`, the top of the simulated chamber is printed on stdout.
    """
    chamber = Chamber(jets)
    seen: dict[tuple[int, int, tuple[int, ...]], tuple[int, int]] = {}
    skipped: int | None = None
    dropped = 0
    while dropped < rocks:
        chamber.drop()
        dropped += 1
        if skipped is not None or chamber.height < PROFILE_DEPTH:
            continue
        key = chamber.state()
        if key in seen:
            prev_dropped, prev_height = seen[key]
            period = dropped - prev_dropped
            cycles = (rocks - dropped) // period
            skipped = cycles * (chamber.height - prev_height)
            dropped += cycles * period
            logger.debug("cycle of %d rocks found after %d rocks; skipping %d cycles", period, prev_dropped, cycles)
        else:
            seen[key] = (dropped, chamber.height)
    if dump:
        print(chamber.render())
    return chamber.height + (skipped or 0)


@guarded(17)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(17, "Height of the rock tower in the chamber.")
    ap.add_argument("--rocks", type=int, default=None, help=f"Rocks to drop (default {PART1_ROCKS} / {PART2_ROCKS}).")
    args = parse_args(ap, 17, argv)
    rocks = args.rocks if args.rocks is not None else (PART1_ROCKS if args.mode == PART1 else PART2_ROCKS)
    if rocks < 0:
        raise SystemExit("--rocks must be >= 0")
    return report(tower_height(parse_jets(read_input(args.input)), rocks, dump=args.verbose))


if __name__ == "__main__":
    raise SystemExit(main())
