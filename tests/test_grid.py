import io

import pytest

from aoc2022.aoclib import DenseGrid, Point


def test_corners_are_normalised() -> None:
    grid = DenseGrid(Point(5, -1), Point(2, 3), 0)
    assert (grid.min_x, grid.max_x, grid.min_y, grid.max_y) == (2, 5, -1, 3)
    assert (grid.width, grid.height, grid.size) == (4, 5, 20)
    assert grid.upper_left == Point(2, -1)
    assert grid.lower_right == Point(5, 3)


def test_single_cell_grid() -> None:
    grid = DenseGrid(Point(7, 7), Point(7, 7), ".", dtype="<U1")
    assert grid.size == 1
    assert grid.get(Point(7, 7)) == "."


def test_get_and_set_respect_bounds() -> None:
    grid = DenseGrid(Point(10, 10), Point(12, 11), 0)
    assert grid.set(Point(12, 11), 4) is True
    assert grid.get(Point(12, 11)) == 4
    assert grid.set(Point(13, 11), 4) is False
    assert grid.get(Point(13, 11)) is None
    assert grid.count(4) == 1


def test_negative_offsets_never_wrap() -> None:
    grid = DenseGrid(Point(0, 0), Point(2, 2), 0)
    grid[Point(2, 2)] = 9
    # (-1, -1) would be data[-1, -1] if indices leaked through to numpy
    assert grid.get(Point(-1, -1)) is None
    with pytest.raises(IndexError):
        grid[Point(-1, -1)]
    with pytest.raises(IndexError):
        grid[Point(0, 3)] = 1
    assert grid.count(1) == 0


def test_get_returns_python_scalars() -> None:
    grid = DenseGrid(Point(0, 0), Point(1, 1), 3)
    assert type(grid.get(Point(0, 0))) is int


def test_points_are_row_major() -> None:
    grid = DenseGrid(Point(0, 0), Point(1, 1), 0)
    assert list(grid.points()) == [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]


def test_render_and_dump() -> None:
    grid = DenseGrid(Point(-1, 0), Point(1, 1), ".", dtype="<U1")
    grid[Point(-1, 0)] = "#"
    grid[Point(1, 1)] = "o"
    assert grid.render() == "#..\n..o"
    assert grid.render(lambda c: "X" if c == "#" else " ") == "X  \n   "
    out = io.StringIO()
    grid.dump_with(file=out)
    assert out.getvalue() == "#..\n..o\n"


def test_from_lines_pads_short_rows() -> None:
    grid = DenseGrid.from_lines(["  .#", ".", ""], fill=" ")
    assert (grid.width, grid.height) == (4, 3)
    assert grid.get(Point(3, 0)) == "#"
    assert grid.get(Point(1, 1)) == " "
    with pytest.raises(ValueError):
        DenseGrid.from_lines([])
