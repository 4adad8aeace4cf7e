import unittest

from aoc2022.aoclib import ADJACENT, ORTHOGONAL, Point


class TestPoint(unittest.TestCase):
    def test_transpose(self) -> None:
        self.assertEqual(Point(3, -7).transpose(), Point(-7, 3))
        self.assertEqual(Point(3, -7).transpose().transpose(), Point(3, -7))

    def test_manhattan_distance(self) -> None:
        self.assertEqual(Point(1, 2).manhattan_distance_to(Point(-2, 6)), 7)
        self.assertEqual(Point(-2, 6).manhattan_distance_to(Point(1, 2)), 7)
        self.assertEqual(Point(5, 5).manhattan_distance_to(Point(5, 5)), 0)

    def test_arithmetic(self) -> None:
        self.assertEqual(Point(1, 2) + Point(3, -4), Point(4, -2))
        self.assertEqual(Point(1, 2) - Point(3, -4), Point(-2, 6))
        self.assertEqual(Point(1, -2) * 3, Point(3, -6))
        self.assertEqual(3 * Point(1, -2), Point(3, -6))
        self.assertEqual(-Point(1, -2), Point(-1, 2))

    def test_str(self) -> None:
        self.assertEqual(str(Point(4, -1)), "(4, -1)")

    def test_ordering_and_hashing(self) -> None:
        self.assertLess(Point(0, 9), Point(1, 0))
        self.assertEqual(len({Point(1, 1), Point(1, 1), Point(1, 2)}), 2)

    def test_line_includes_both_endpoints(self) -> None:
        self.assertEqual(list(Point(2, 5).line_to(Point(2, 8))), [Point(2, y) for y in range(5, 9)])
        self.assertEqual(list(Point(4, 0).line_to(Point(1, 0))), [Point(x, 0) for x in (4, 3, 2, 1)])

    def test_line_reversal_is_symmetric(self) -> None:
        a, b = Point(-3, 7), Point(6, 7)
        self.assertEqual(list(a.line_to(b)), list(reversed(list(b.line_to(a)))))

    def test_zero_length_line(self) -> None:
        self.assertEqual(list(Point(1, 1).line_to(Point(1, 1))), [Point(1, 1)])

    def test_diagonal_line_rejected(self) -> None:
        with self.assertRaises(ValueError):
            list(Point(0, 0).line_to(Point(2, 2)))

    def test_neighbors(self) -> None:
        self.assertEqual(set(Point(0, 0).neighbors4()), set(ORTHOGONAL))
        self.assertEqual(len(set(Point(5, 5).neighbors8())), 8)
        self.assertNotIn(Point(0, 0), ADJACENT)
