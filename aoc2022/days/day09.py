"""Day 9: Rope Bridge.

Simulates a rope of `num_knots` knots following head moves and counts the
distinct positions visited by the tail. With `--plot PATH` the tail trail is
saved as an image.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..aoclib import EAST, NORTH, SOUTH, WEST, Point
from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

# y grows downwards, so "U" is NORTH
DIRECTIONS = {"U": NORTH, "D": SOUTH, "L": WEST, "R": EAST}


def parse_moves(text: str) -> list[tuple[Point, int]]:
    moves = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2 or fields[0] not in DIRECTIONS or not fields[1].isdigit():
            raise PuzzleInputError(f"expected 'U|D|L|R N', got {line!r}", line=lineno)
        moves.append((DIRECTIONS[fields[0]], int(fields[1])))
    return moves


def follow(knot: Point, leader: Point) -> Point:
    """Where `knot` moves once `leader` has moved (no move while touching)."""
    gap = leader - knot
    if abs(gap.x) <= 1 and abs(gap.y) <= 1:
        return knot
    return knot + gap.sign()


def tail_trail(moves: list[tuple[Point, int]], num_knots: int) -> list[Point]:
    """Tail position after every single step, starting at the origin."""
    if num_knots < 2:
        raise ValueError(f"a rope needs at least 2 knots, got {num_knots}")
    knots = [Point(0, 0)] * num_knots
    trail = [knots[-1]]
    for direction, steps in moves:
        for _ in range(steps):
            knots[0] = knots[0] + direction
            for i in range(1, num_knots):
                moved = follow(knots[i], knots[i - 1])
                if moved == knots[i]:
                    break
                knots[i] = moved
            trail.append(knots[-1])
    return trail


def plot_trail(trail: list[Point], filename: Path) -> None:
    """Save the tail trail as a PNG (needs the `plot` extra)."""
    try:
        import matplotlib
    except ImportError as exc:  # pragma: no cover
        raise SystemExit(f"--plot requires matplotlib (pip install 'aoc2022[plot]'): {exc}") from exc

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    visited = sorted(set(trail))
    plt.figure(figsize=(8, 8))
    plt.plot([p.x for p in trail], [p.y for p in trail], "-", color="0.8", linewidth=0.5)
    plt.scatter([p.x for p in visited], [p.y for p in visited], s=2, c="g")
    plt.gca().invert_yaxis()
    plt.axis("equal")
    plt.title(f"Tail visited {len(visited)} positions")
    plt.savefig(filename)
    plt.close()
    logger.info("saved tail trail plot to %s", filename)


@guarded(9)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(9, "Positions visited by the tail of a rope.")
    ap.add_argument("--num-knots", type=int, default=None, help="Rope length (default: 2 for part1, 10 for part2).")
    ap.add_argument("--plot", type=Path, default=None, help="Save a PNG of the tail trail to this path.")
    args = parse_args(ap, 9, argv)

    num_knots = args.num_knots if args.num_knots is not None else (2 if args.mode == PART1 else 10)
    if num_knots < 2:
        raise SystemExit("--num-knots must be at least 2")
    trail = tail_trail(parse_moves(read_input(args.input)), num_knots)
    if args.plot is not None:
        plot_trail(trail, args.plot)
    return report(len(set(trail)))


if __name__ == "__main__":
    raise SystemExit(main())
