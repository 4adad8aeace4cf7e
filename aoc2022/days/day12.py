"""Day 12: Hill Climbing Algorithm.

The height map becomes a directed graph (a step may climb at most one level,
descending is free) solved with `scipy.sparse.csgraph` breadth-first
shortest paths.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import shortest_path

from ..constants import PART1, Mode
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)


def parse_heightmap(text: str) -> tuple[np.ndarray, int, int]:
    """Return `(heights, start, end)`; positions are flat row-major indices."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise PuzzleInputError("empty height map")
    width = len(rows[0])
    for lineno, row in enumerate(rows, start=1):
        if len(row) != width:
            raise PuzzleInputError(f"expected {width} columns, got {len(row)}", line=lineno)
    chars = np.array([list(row) for row in rows])
    if np.count_nonzero(chars == "S") != 1 or np.count_nonzero(chars == "E") != 1:
        raise PuzzleInputError("the map needs exactly one 'S' and one 'E'")
    start = int(np.flatnonzero(chars == "S")[0])
    end = int(np.flatnonzero(chars == "E")[0])
    letters = np.where(chars == "S", "a", np.where(chars == "E", "z", chars))
    if not np.all((letters >= "a") & (letters <= "z")):
        raise PuzzleInputError("heights must be lowercase letters")
    heights = np.vectorize(ord)(letters).astype(np.int16) - ord("a")
    return heights, start, end


def climb_graph(heights: np.ndarray) -> csr_matrix:
    """Adjacency matrix with an edge u -> v when v is at most one level above u."""
    rows, cols = heights.shape
    index = np.arange(rows * cols).reshape(rows, cols)
    src: list[np.ndarray] = []
    dst: list[np.ndarray] = []
    for a, b in (
        ((slice(None), slice(None, -1)), (slice(None), slice(1, None))),
        ((slice(None, -1), slice(None)), (slice(1, None), slice(None))),
    ):
        for u, v in ((a, b), (b, a)):
            ok = heights[v] <= heights[u] + 1
            src.append(index[u][ok])
            dst.append(index[v][ok])
    src_all = np.concatenate(src)
    dst_all = np.concatenate(dst)
    return csr_matrix((np.ones(src_all.size), (src_all, dst_all)), shape=(rows * cols, rows * cols))


def fewest_steps(heights: np.ndarray, start: int, end: int, mode: Mode) -> int:
    graph = climb_graph(heights)
    if mode == PART1:
        dist = shortest_path(graph, directed=True, unweighted=True, indices=start)[end]
    else:
        # walk backwards from the summit to every lowest square at once
        back = shortest_path(graph.T.tocsr(), directed=True, unweighted=True, indices=end)
        dist = back[heights.ravel() == 0].min()
    if not np.isfinite(dist):
        raise PuzzleInputError("the summit cannot be reached")
    logger.debug("graph: %d squares, %d edges", graph.shape[0], graph.nnz)
    return int(dist)


@guarded(12)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(12, "Fewest steps to the best signal location.")
    args = parse_args(ap, 12, argv)
    heights, start, end = parse_heightmap(read_input(args.input))
    return report(fewest_steps(heights, start, end, args.mode))


if __name__ == "__main__":
    raise SystemExit(main())
