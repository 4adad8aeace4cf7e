from pathlib import Path

import numpy as np
import pytest

from aoc2022.aoclib import Point
from aoc2022.days import day09, day10, day11, day13, day14, day15, day16
from aoc2022.errors import PuzzleInputError

ROPE = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
LONG_ROPE = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"

NOOPS = "noop\n" * 240
COUNTER = "addx 1\n" * 120

MONKEYS = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""

HEIGHTMAP = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n"

PACKETS = """[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""

ROCK_PATHS = "498,4 -> 498,6 -> 496,6\n503,4 -> 502,4 -> 502,9 -> 494,9\n"

SENSORS = """Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""

VALVES = """Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""


@pytest.mark.parametrize("mode, expected", [("part1", "13"), ("part2", "1")])
def test_day09_example(solve, mode: str, expected: str) -> None:
    assert solve(9, ROPE, "--mode", mode) == expected


def test_day09_larger_example(solve) -> None:
    assert solve(9, LONG_ROPE, "--mode", "part2") == "36"
    assert solve(9, LONG_ROPE, "--mode", "part1", "--num-knots", "10") == "36"


def test_day09_follow_rules() -> None:
    assert day09.follow(Point(0, 0), Point(1, 1)) == Point(0, 0)
    assert day09.follow(Point(0, 0), Point(2, 0)) == Point(1, 0)
    assert day09.follow(Point(0, 0), Point(2, 1)) == Point(1, 1)


def test_day09_plot(solve, tmp_path: Path) -> None:
    pytest.importorskip("matplotlib")
    out = tmp_path / "trail.png"
    assert solve(9, ROPE, "--mode", "part1", "--plot", str(out)) == "13"
    assert out.is_file() and out.stat().st_size > 0


def test_day10_signal_strength(solve) -> None:
    assert solve(10, NOOPS, "--mode", "part1") == str(sum(day10.SAMPLE_CYCLES))
    # X is 1 + (cycle - 1) // 2 while counting up
    assert solve(10, COUNTER, "--mode", "part1") == "57200"


def test_day10_crt(solve) -> None:
    assert solve(10, NOOPS, "--mode", "part2").splitlines() == ["###" + "." * 37] * 6
    rows = day10.render_crt(day10.parse_program(COUNTER))
    assert rows[0].startswith("####")
    assert len(rows) == 6 and all(len(row) == 40 for row in rows)


def test_day10_small_program() -> None:
    values = list(day10.register_values(day10.parse_program("noop\naddx 3\naddx -5\n")))
    assert values == [(1, 1), (2, 1), (3, 1), (4, 4), (5, 4)]


@pytest.mark.parametrize("mode, expected", [("part1", "10605"), ("part2", "2713310158")])
def test_day11_example(solve, mode: str, expected: str) -> None:
    assert solve(11, MONKEYS, "--mode", mode) == expected


def test_day11_inspection_counts_after_one_round() -> None:
    monkeys = day11.parse_monkeys(MONKEYS)
    day11.play(monkeys, 1, "part2")
    assert [m.inspected for m in monkeys] == [2, 4, 3, 6]


@pytest.mark.parametrize("mode, expected", [("part1", "31"), ("part2", "29")])
def test_day12_example(solve, mode: str, expected: str) -> None:
    assert solve(12, HEIGHTMAP, "--mode", mode) == expected


def test_day12_unreachable(solve) -> None:
    with pytest.raises(SystemExit):
        solve(12, "SazE\n", "--mode", "part1")


@pytest.mark.parametrize("mode, expected", [("part1", "13"), ("part2", "140")])
def test_day13_example(solve, mode: str, expected: str) -> None:
    assert solve(13, PACKETS, "--mode", mode) == expected


def test_day13_compare_mixed_types() -> None:
    assert day13.compare([[1], [2, 3, 4]], [[1], 4]) < 0
    assert day13.compare([9], [[8, 7, 6]]) > 0
    assert day13.compare([[2]], [2]) == 0


@pytest.mark.parametrize("mode, expected", [("part1", "24"), ("part2", "93")])
def test_day14_example(solve, mode: str, expected: str) -> None:
    assert solve(14, ROCK_PATHS, "--mode", mode) == expected


def test_day14_verbose_dump_shows_sand(solve) -> None:
    out = solve(14, ROCK_PATHS, "--mode", "part1", "--verbose").splitlines()
    assert out[-1] == "24"
    assert any("o" in line for line in out)


def test_day14_diagonal_path_rejected() -> None:
    paths = day14.parse_paths("498,4 -> 499,5\n")
    with pytest.raises(PuzzleInputError):
        day14.build_cave(paths, "part1")


def test_day15_row_coverage(solve) -> None:
    assert solve(15, SENSORS, "--mode", "part1", "--param", "10") == "26"


def test_day15_tuning_frequency(solve) -> None:
    assert solve(15, SENSORS, "--mode", "part2", "--param", "20") == "56000011"


def test_day15_merge_intervals() -> None:
    assert day15.merge_intervals([(5, 7), (1, 3), (4, 4), (10, 12)]) == [(1, 7), (10, 12)]
    assert day15.find_distress_beacon(day15.parse_sensors(SENSORS), 20) == Point(14, 11)


@pytest.mark.parametrize("mode, expected", [("part1", "1651"), ("part2", "1707")])
def test_day16_example(solve, mode: str, expected: str) -> None:
    assert solve(16, VALVES, "--mode", mode) == expected


def test_day16_subset_maximum() -> None:
    best = np.array([0, 5, 3, 1])
    assert day16.best_within_subsets(best).tolist() == [0, 5, 3, 5]


def test_day09_rejects_short_rope(solve) -> None:
    with pytest.raises(SystemExit):
        solve(9, ROPE, "--mode", "part1", "--num-knots", "0")
    with pytest.raises(SystemExit):
        solve(9, ROPE, "--mode", "part1", "--num-knots", "1")
