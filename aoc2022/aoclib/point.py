"""Integer 2D points.

`Point` is the coordinate type of the shared grid library. `x` grows to the
right and `y` grows downwards, matching how puzzle maps are printed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, order=True)
class Point:
    """Immutable lattice point, hashable and ordered by `(x, y)`."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def transpose(self) -> Point:
        """Swap the axes."""
        return Point(self.y, self.x)

    def manhattan_distance_to(self, other: Point) -> int:
        """Return `|dx| + |dy|`."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def sign(self) -> Point:
        """Componentwise sign, i.e. the unit step towards this offset."""
        return Point(_sign(self.x), _sign(self.y))

    def line_to(self, other: Point) -> Iterator[Point]:
        """Yield every point from `self` to `other`, both endpoints included.

        Only horizontal and vertical lines can be rasterised.

        Raises:
            ValueError: If the line is diagonal.
        """
        if self.x != other.x and self.y != other.y:
            raise ValueError(f"line {self} -> {other} is neither horizontal nor vertical")
        step = (other - self).sign()
        current = self
        yield current
        while current != other:
            current = current + step
            yield current

    def neighbors4(self) -> Iterator[Point]:
        """Orthogonal neighbours."""
        for offset in ORTHOGONAL:
            yield self + offset

    def neighbors8(self) -> Iterator[Point]:
        """Orthogonal and diagonal neighbours."""
        for offset in ADJACENT:
            yield self + offset


NORTH = Point(0, -1)
SOUTH = Point(0, 1)
WEST = Point(-1, 0)
EAST = Point(1, 0)

ORTHOGONAL: tuple[Point, ...] = (NORTH, SOUTH, WEST, EAST)
ADJACENT: tuple[Point, ...] = tuple(Point(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0))
