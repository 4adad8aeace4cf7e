"""Day 8: Treetop Tree House."""

from __future__ import annotations

import numpy as np

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report


def parse_heights(text: str) -> np.ndarray:
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise PuzzleInputError("empty tree map")
    width = len(rows[0])
    for lineno, row in enumerate(rows, start=1):
        if len(row) != width or not row.isdigit():
            raise PuzzleInputError(f"expected {width} digits, got {row!r}", line=lineno)
    return np.array([[int(ch) for ch in row] for row in rows], dtype=np.int8)


def _visible_from_left(heights: np.ndarray) -> np.ndarray:
    # tallest tree strictly before each column; the edge sees -1
    blocking = np.maximum.accumulate(heights, axis=1)
    shifted = np.full_like(heights, -1)
    shifted[:, 1:] = blocking[:, :-1]
    return heights > shifted


def visible_mask(heights: np.ndarray) -> np.ndarray:
    """Boolean mask of trees visible from at least one edge."""
    return (
        _visible_from_left(heights)
        | _visible_from_left(heights[:, ::-1])[:, ::-1]
        | _visible_from_left(heights.T).T
        | _visible_from_left(heights.T[:, ::-1])[:, ::-1].T
    )


def scenic_score(heights: np.ndarray, row: int, col: int) -> int:
    """Product of viewing distances in the four directions."""
    h = heights[row, col]
    score = 1
    for line in (heights[row, :col][::-1], heights[row, col + 1 :], heights[:row, col][::-1], heights[row + 1 :, col]):
        distance = 0
        for tree in line:
            distance += 1
            if tree >= h:
                break
        score *= distance
    return score


def best_scenic_score(heights: np.ndarray) -> int:
    rows, cols = heights.shape
    return max(scenic_score(heights, r, c) for r in range(rows) for c in range(cols))


@guarded(8)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(8, "Tree visibility and scenic scores.")
    args = parse_args(ap, 8, argv)
    heights = parse_heights(read_input(args.input))
    if args.mode == PART1:
        return report(int(np.count_nonzero(visible_mask(heights))))
    return report(best_scenic_score(heights))


if __name__ == "__main__":
    raise SystemExit(main())
