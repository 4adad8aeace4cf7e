"""Day 14: Regolith Reservoir."""

from __future__ import annotations

import logging

from ..aoclib import DenseGrid, Point
from ..constants import PART1, Mode
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

SOURCE = Point(500, 0)
AIR, ROCK, SAND = ".", "#", "o"
# order in which a grain tries to fall
FALL = (Point(0, 1), Point(-1, 1), Point(1, 1))


def parse_paths(text: str) -> list[list[Point]]:
    paths = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        path = []
        for token in line.split("->"):
            try:
                x, y = (int(v) for v in token.split(","))
            except ValueError as exc:
                raise PuzzleInputError(f"expected 'x,y', got {token.strip()!r}", line=lineno) from exc
            path.append(Point(x, y))
        paths.append(path)
    if not paths:
        raise PuzzleInputError("no rock paths in input")
    return paths


def build_cave(paths: list[list[Point]], mode: Mode) -> DenseGrid:
    """Cave grid with rock drawn in; part 2 adds the floor two rows below the lowest rock."""
    points = [p for path in paths for p in path] + [SOURCE]
    max_y = max(p.y for p in points)
    if mode == PART1:
        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
    else:
        # the sand pile spreads at most one column per row below the source
        max_y += 2
        min_x = min(min(p.x for p in points), SOURCE.x - max_y - 1)
        max_x = max(max(p.x for p in points), SOURCE.x + max_y + 1)
    cave = DenseGrid(Point(min_x, min(p.y for p in points)), Point(max_x, max_y), AIR, dtype="<U1")
    for path in paths:
        for a, b in zip(path, path[1:]):
            try:
                for p in a.line_to(b):
                    cave[p] = ROCK
            except ValueError as exc:
                raise PuzzleInputError(str(exc)) from exc
    if mode != PART1:
        for p in Point(min_x, max_y).line_to(Point(max_x, max_y)):
            cave[p] = ROCK
    return cave


def pour_sand(cave: DenseGrid) -> int:
    """Drop grains until one leaves the cave or the source is blocked.

    Returns the number of grains at rest. The path of the previous grain is
    kept as a stack so each new grain resumes just above where the last one
    settled.
    """
    rested = 0
    path = [SOURCE]
    while path:
        grain = path[-1]
        for step in FALL:
            nxt = grain + step
            cell = cave.get(nxt)
            if cell is None:
                return rested  # falls into the abyss
            if cell == AIR:
                path.append(nxt)
                break
        else:
            cave[grain] = SAND
            rested += 1
            path.pop()
    return rested


@guarded(14)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(14, "Units of sand that come to rest in the cave.")
    args = parse_args(ap, 14, argv)
    cave = build_cave(parse_paths(read_input(args.input)), args.mode)
    logger.debug("cave %s", cave)
    if args.verbose:
        cave.dump_with()
    rested = pour_sand(cave)
    if args.verbose:
        print()
        cave.dump_with()
    return report(rested)


if __name__ == "__main__":
    raise SystemExit(main())
