"""Day 22: Monkey Map.

Part 1 wraps around the flat board. Part 2 folds the board into a cube: each
face gets a 3D orientation (outward normal `n`, board-right `r` and board-down
`d` unit vectors) by rolling an imaginary cube across the net, and positions
are mapped to doubled 3D coordinates so cell centres stay integral. Stepping
over an edge then reduces to a little vector arithmetic, whatever the net.
"""

from __future__ import annotations

import logging
import math
import re
from collections import deque
from dataclasses import dataclass
from typing import Callable

from ..aoclib import EAST, NORTH, SOUTH, WEST, DenseGrid, Point
from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

VOID, OPEN, WALL = " ", ".", "#"
FACINGS = (EAST, SOUTH, WEST, NORTH)
TRAIL = {EAST: ">", SOUTH: "v", WEST: "<", NORTH: "^"}

Vec3 = tuple[int, int, int]
Step = Callable[[Point, Point], tuple[Point, Point]]


def _neg(v: Vec3) -> Vec3:
    return (-v[0], -v[1], -v[2])


def _dot(a: Vec3, b: Vec3) -> int:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _combine(*terms: tuple[int, Vec3]) -> Vec3:
    return tuple(sum(k * v[axis] for k, v in terms) for axis in range(3))  # type: ignore[return-value]


def parse_notes(text: str) -> tuple[DenseGrid, list[int | str]]:
    """Return the board and the path (step counts and `L`/`R` turns)."""
    lines = text.rstrip("\n").splitlines()
    try:
        split = lines.index("")
    except ValueError as exc:
        raise PuzzleInputError("expected a blank line between the board and the path") from exc
    board_lines = lines[:split]
    for lineno, line in enumerate(board_lines, start=1):
        if set(line) - {VOID, OPEN, WALL}:
            raise PuzzleInputError(f"unexpected board characters in {line!r}", line=lineno)
    if not board_lines:
        raise PuzzleInputError("empty board")
    board = DenseGrid.from_lines(board_lines, fill=VOID)

    path_text = "".join(lines[split + 1 :]).strip()
    tokens = re.findall(r"\d+|[LR]", path_text)
    if not path_text or "".join(tokens) != path_text:
        raise PuzzleInputError(f"malformed path {path_text[:40]!r}")
    return board, [int(tok) if tok.isdigit() else tok for tok in tokens]


def _walkable(cell: str | None) -> bool:
    return cell is not None and cell != VOID


def wrap_step(board: DenseGrid) -> Step:
    """Flat wrap-around: leaving the board re-enters on the far side of the same row or column."""

    def step(pos: Point, facing: Point) -> tuple[Point, Point]:
        nxt = pos + facing
        if not _walkable(board.get(nxt)):
            nxt = pos
            while _walkable(board.get(nxt - facing)):
                nxt = nxt - facing
        return nxt, facing

    return step


@dataclass(frozen=True)
class Face:
    tile: Point
    n: Vec3
    r: Vec3
    d: Vec3


def fold_cube(board: DenseGrid) -> tuple[int, dict[Point, Face]]:
    """Face size and the orientation of each face, keyed by its tile on the net."""
    cells = sum(1 for p in board.points() if _walkable(board.get(p)))
    size = math.isqrt(cells // 6)
    if size == 0 or 6 * size * size != cells:
        raise PuzzleInputError(f"{cells} cells cannot form a cube")
    tiles = {
        Point(tx, ty)
        for ty in range(board.height // size)
        for tx in range(board.width // size)
        if _walkable(board.get(Point(tx * size, ty * size)))
    }
    if len(tiles) != 6:
        raise PuzzleInputError(f"the net has {len(tiles)} faces of size {size}, expected 6")

    first = min(tiles, key=lambda t: (t.y, t.x))
    faces = {first: Face(first, (0, 0, 1), (1, 0, 0), (0, 1, 0))}
    queue = deque([first])
    while queue:
        f = faces[queue.popleft()]
        rolls = {
            EAST: (f.r, _neg(f.n), f.d),
            WEST: (_neg(f.r), f.n, f.d),
            SOUTH: (f.d, f.r, _neg(f.n)),
            NORTH: (_neg(f.d), f.r, f.n),
        }
        for direction, (n, r, d) in rolls.items():
            tile = f.tile + direction
            if tile in tiles and tile not in faces:
                faces[tile] = Face(tile, n, r, d)
                queue.append(tile)
    if len({f.n for f in faces.values()}) != 6:
        raise PuzzleInputError("the net does not fold into a cube")
    return size, faces


def cube_step(board: DenseGrid) -> Step:
    """Walking on the folded cube."""
    size, faces = fold_cube(board)
    by_normal = {f.n: f for f in faces.values()}

    def step(pos: Point, facing: Point) -> tuple[Point, Point]:
        nxt = pos + facing
        tile = Point(pos.x // size, pos.y // size)
        if Point(nxt.x // size, nxt.y // size) == tile:
            return nxt, facing

        f = faces[tile]
        i, j = pos.x - tile.x * size, pos.y - tile.y * size
        # doubled 3D coordinates of the cell centre
        p = _combine((size, f.n), (2 * i - (size - 1), f.r), (2 * j - (size - 1), f.d))
        v = _combine((facing.x, f.r), (facing.y, f.d))
        p = _combine((1, p), (1, v), (-1, f.n))
        g = by_normal[v]
        i2 = (_dot(p, g.r) + size - 1) // 2
        j2 = (_dot(p, g.d) + size - 1) // 2
        down = _neg(f.n)
        return Point(g.tile.x * size + i2, g.tile.y * size + j2), Point(_dot(down, g.r), _dot(down, g.d))

    return step


def walk(board: DenseGrid, path: list[int | str], step: Step) -> tuple[Point, Point]:
    """Follow `path` from the leftmost open tile of the top row; marks the trail on `board`."""
    pos = next((Point(x, 0) for x in range(board.width) if board.get(Point(x, 0)) == OPEN), None)
    if pos is None:
        raise PuzzleInputError("the top row has no open tile")
    facing = EAST
    board[pos] = TRAIL[facing]
    for move in path:
        if move == "R":
            facing = Point(-facing.y, facing.x)
        elif move == "L":
            facing = Point(facing.y, -facing.x)
        else:
            for _ in range(int(move)):
                nxt, nxt_facing = step(pos, facing)
                if board[nxt] == WALL:
                    break
                pos, facing = nxt, nxt_facing
                board[pos] = TRAIL[facing]
        board[pos] = TRAIL[facing]
    return pos, facing


def password(pos: Point, facing: Point) -> int:
    return 1000 * (pos.y + 1) + 4 * (pos.x + 1) + FACINGS.index(facing)


@guarded(22)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(22, "Final password after following the monkeys' path.")
    args = parse_args(ap, 22, argv)
    board, path = parse_notes(read_input(args.input))
    step = wrap_step(board) if args.mode == PART1 else cube_step(board)
    pos, facing = walk(board, path, step)
    logger.debug("final position %s facing %s", pos, facing)
    if args.verbose:
        board.dump_with()
    return report(password(pos, facing))


if __name__ == "__main__":
    raise SystemExit(main())
