"""Fixed-size rectangular grid addressed by `Point`.

`DenseGrid` is a thin wrapper around a 2D numpy array whose origin can sit
anywhere on the plane (puzzle coordinates are often offset, e.g. sand falls
from x=500). Storage is row-major: `data[y - min_y, x - min_x]`.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

import numpy as np

from .point import Point


class DenseGrid:
    """Bounded grid covering every point between two corners (inclusive).

    Args:
        corner_a: One corner of the covered rectangle.
        corner_b: The opposite corner; the two corners are normalised so any
            pair of opposite corners works.
        fill: Initial value of every cell.
        dtype: numpy dtype of the backing array (inferred from `fill` when
            omitted; use `"<U1"` for character maps).
    """

    def __init__(self, corner_a: Point, corner_b: Point, fill: Any, dtype: Any = None) -> None:
        self.min_x = min(corner_a.x, corner_b.x)
        self.max_x = max(corner_a.x, corner_b.x)
        self.min_y = min(corner_a.y, corner_b.y)
        self.max_y = max(corner_a.y, corner_b.y)
        self.width = self.max_x - self.min_x + 1
        self.height = self.max_y - self.min_y + 1
        self.data = np.full((self.height, self.width), fill, dtype=dtype)

    @property
    def upper_left(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def lower_right(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def size(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"DenseGrid({self.upper_left}..{self.lower_right}, dtype={self.data.dtype})"

    def contains(self, p: Point) -> bool:
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    __contains__ = contains

    def _index(self, p: Point) -> tuple[int, int]:
        return p.y - self.min_y, p.x - self.min_x

    def get(self, p: Point) -> Any:
        """Return the value at `p`, or None when `p` is outside the grid."""
        if not self.contains(p):
            return None
        value = self.data[self._index(p)]
        return value.item() if isinstance(value, np.generic) else value

    def set(self, p: Point, value: Any) -> bool:
        """Store `value` at `p`; return False (and change nothing) when out of bounds."""
        if not self.contains(p):
            return False
        self.data[self._index(p)] = value
        return True

    def __getitem__(self, p: Point) -> Any:
        if not self.contains(p):
            raise IndexError(f"{p} outside grid {self.upper_left}..{self.lower_right}")
        return self.get(p)

    def __setitem__(self, p: Point, value: Any) -> None:
        if not self.set(p, value):
            raise IndexError(f"{p} outside grid {self.upper_left}..{self.lower_right}")

    def points(self) -> Iterator[Point]:
        """Every covered point, row by row."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield Point(x, y)

    def count(self, value: Any) -> int:
        return int(np.count_nonzero(self.data == value))

    def render(self, fmt: Callable[[Any], str] = str) -> str:
        """One text line per row, each cell converted with `fmt`."""
        rows = []
        for y in range(self.min_y, self.max_y + 1):
            rows.append("".join(fmt(self.get(Point(x, y))) for x in range(self.min_x, self.max_x + 1)))
        return "\n".join(rows)

    def dump_with(self, fmt: Callable[[Any], str] = str, file: TextIO | None = None) -> None:
        """Print `render(fmt)` to `file` (default stdout)."""
        print(self.render(fmt), file=sys.stdout if file is None else file)

    @classmethod
    def from_lines(cls, lines: list[str], *, fill: str = " ") -> DenseGrid:
        """Character grid from text rows, padding short rows with `fill`; origin at (0, 0)."""
        width = max((len(line) for line in lines), default=0)
        if not lines or width == 0:
            raise ValueError("cannot build a grid from empty text")
        grid = cls(Point(0, 0), Point(width - 1, len(lines) - 1), fill, dtype="<U1")
        for y, line in enumerate(lines):
            if line:
                grid.data[y, : len(line)] = list(line)
        return grid
