"""Day 23: Unstable Diffusion."""

from __future__ import annotations

import logging
from collections import Counter

from ..aoclib import ADJACENT, EAST, NORTH, SOUTH, WEST, DenseGrid, Point
from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

ROUNDS = 10
# each proposal: direction moved, and the three cells that must be empty
PROPOSALS: tuple[tuple[Point, tuple[Point, ...]], ...] = tuple(
    (direction, tuple(off for off in ADJACENT if (off.x == direction.x if direction.x else off.y == direction.y)))
    for direction in (NORTH, SOUTH, WEST, EAST)
)


def parse_elves(text: str) -> set[Point]:
    elves = set()
    for y, line in enumerate(text.splitlines()):
        for x, ch in enumerate(line.rstrip()):
            if ch == "#":
                elves.add(Point(x, y))
            elif ch != ".":
                raise PuzzleInputError(f"unexpected character {ch!r}", line=y + 1)
    if not elves:
        raise PuzzleInputError("no elves on the map")
    return elves


def spread(elves: set[Point], round_index: int) -> tuple[set[Point], bool]:
    """One round; returns the new positions and whether any elf moved."""
    proposals: dict[Point, Point] = {}
    for elf in elves:
        if not any(elf + off in elves for off in ADJACENT):
            continue
        for k in range(len(PROPOSALS)):
            direction, checks = PROPOSALS[(round_index + k) % len(PROPOSALS)]
            if not any(elf + off in elves for off in checks):
                proposals[elf] = elf + direction
                break
    if not proposals:
        return elves, False
    wanted = Counter(proposals.values())
    moved = {elf: target for elf, target in proposals.items() if wanted[target] == 1}
    return {moved.get(elf, elf) for elf in elves}, bool(moved)


def bounding_box(elves: set[Point]) -> tuple[Point, Point]:
    return (
        Point(min(p.x for p in elves), min(p.y for p in elves)),
        Point(max(p.x for p in elves), max(p.y for p in elves)),
    )


def empty_ground(elves: set[Point]) -> int:
    upper_left, lower_right = bounding_box(elves)
    area = (lower_right.x - upper_left.x + 1) * (lower_right.y - upper_left.y + 1)
    return area - len(elves)


def render(elves: set[Point]) -> str:
    grid = DenseGrid(*bounding_box(elves), ".", dtype="<U1")
    for elf in elves:
        grid[elf] = "#"
    return grid.render()


def settle(elves: set[Point]) -> int:
    """Number of the first round in which no elf moves."""
    round_index = 0
    while True:
        elves, moved = spread(elves, round_index)
        round_index += 1
        if not moved:
            return round_index


@guarded(23)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(23, "Spread the elves out to plant the grove.")
    args = parse_args(ap, 23, argv)
    elves = parse_elves(read_input(args.input))
    if args.mode != PART1:
        return report(settle(elves))
    for round_index in range(ROUNDS):
        elves, _ = spread(elves, round_index)
    logger.debug("%d elves after %d rounds", len(elves), ROUNDS)
    if args.verbose:
        print(render(elves))
    return report(empty_ground(elves))


if __name__ == "__main__":
    raise SystemExit(main())
