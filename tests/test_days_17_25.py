import pytest

from aoc2022.aoclib import EAST, NORTH, Point
from aoc2022.days import day17, day18, day19, day20, day21, day22, day23, day25
from aoc2022.errors import PuzzleInputError

JETS = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>\n"

CUBES = """2,2,2
1,2,2
3,2,2
2,1,2
2,3,2
2,2,1
2,2,3
2,2,4
2,2,6
1,2,5
3,2,5
2,1,5
2,3,5
"""

BLUEPRINTS = (
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian.\n"
    "Blueprint 2: Each ore robot costs 2 ore. Each clay robot costs 3 ore. "
    "Each obsidian robot costs 3 ore and 8 clay. Each geode robot costs 3 ore and 12 obsidian.\n"
)

NUMBERS = "1\n2\n-3\n3\n-2\n0\n4\n"

JOBS = """root: pppw + sjmn
dbpl: 5
cczh: sllz + lgvd
zczc: 2
ptdq: humn - dvpt
dvpt: 3
lfqf: 4
humn: 5
ljgn: 2
sjmn: drzm * dbpl
sllz: 4
pppw: cczh / lfqf
lgvd: ljgn * ptdq
drzm: hmdt - zczc
hmdt: 32
"""

NOTES = "\n".join(
    [
        "        ...#",
        "        .#..",
        "        #...",
        "        ....",
        "...#.......#",
        "........#...",
        "..#....#....",
        "..........#.",
        "        ...#....",
        "        .....#..",
        "        .#......",
        "        ......#.",
        "",
        "10R5L5R10L4R5L5",
        "",
    ]
)

ELVES = """....#..
..###.#
#...#.#
.#...##
#.###..
##.#.##
.#..#..
"""

SMALL_ELVES = ".....\n..##.\n..#..\n.....\n..##.\n.....\n"

VALLEY = """#.######
#>>.<^<#
#.<..<<#
#>v.><>#
#<^v^^>#
######.#
"""

SNAFU = """1=-0-2
12111
2=0=
21
2=01
111
20012
112
1=-1=
1-12
12
1=
122
"""


@pytest.mark.parametrize("mode, expected", [("part1", "3068"), ("part2", "1514285714288")])
def test_day17_example(solve, mode: str, expected: str) -> None:
    assert solve(17, JETS, "--mode", mode) == expected


def test_day17_cycle_skip_matches_plain_simulation() -> None:
    jets = day17.parse_jets(JETS)
    chamber = day17.Chamber(jets)
    for _ in range(5000):
        chamber.drop()
    assert day17.tower_height(jets, 5000) == chamber.height


def test_day17_first_rocks(solve) -> None:
    assert solve(17, JETS, "--mode", "part1", "--rocks", "1") == "1"
    assert solve(17, JETS, "--mode", "part1", "--rocks", "0") == "0"


@pytest.mark.parametrize("mode, expected", [("part1", "64"), ("part2", "58")])
def test_day18_example(solve, mode: str, expected: str) -> None:
    assert solve(18, CUBES, "--mode", mode) == expected


def test_day18_two_cubes() -> None:
    volume = day18.voxelize(day18.parse_cubes("1,1,1\n2,1,1\n"))
    assert day18.surface_area(volume) == 10


def test_day18_hollow_shell_has_no_inner_surface() -> None:
    shell = [(x, y, z) for x in range(3) for y in range(3) for z in range(3) if (x, y, z) != (1, 1, 1)]
    volume = day18.voxelize(day18.parse_cubes("".join(f"{x},{y},{z}\n" for x, y, z in shell)))
    assert day18.surface_area(volume) == 54 + 6
    assert day18.surface_area(day18.fill_pockets(volume)) == 54


def test_day19_geodes_per_blueprint() -> None:
    bp1, bp2 = day19.parse_blueprints(BLUEPRINTS)
    assert day19.max_geodes(bp1, 24) == 9
    assert day19.max_geodes(bp2, 24) == 12


def test_day19_quality_levels(solve) -> None:
    assert solve(19, BLUEPRINTS, "--mode", "part1", "--jobs", "1") == "33"
    assert solve(19, BLUEPRINTS, "--mode", "part1", "--jobs", "2") == "33"


def test_day19_longer_run() -> None:
    bp1 = day19.parse_blueprints(BLUEPRINTS)[0]
    assert day19.max_geodes(bp1, 32) == 56


def test_day19_rejects_garbage() -> None:
    with pytest.raises(PuzzleInputError):
        day19.parse_blueprints("Blueprint 1: nothing useful")


@pytest.mark.parametrize("mode, expected", [("part1", "3"), ("part2", "1623178306")])
def test_day20_example(solve, mode: str, expected: str) -> None:
    assert solve(20, NUMBERS, "--mode", mode) == expected


def test_day20_mixing_keeps_values() -> None:
    mixed = day20.mix(day20.parse_numbers(NUMBERS))
    assert sorted(mixed) == sorted([1, 2, -3, 3, -2, 0, 4])
    zero = mixed.index(0)
    assert [mixed[(zero + k) % 7] for k in range(7)] == [0, 3, -2, 1, 2, -3, 4]


@pytest.mark.parametrize("mode, expected", [("part1", "152"), ("part2", "301")])
def test_day21_example(solve, mode: str, expected: str) -> None:
    assert solve(21, JOBS, "--mode", mode) == expected


def test_day21_human_on_the_right_of_division() -> None:
    jobs = day21.parse_jobs("root: a + b\na: 10\nb: c / humn\nc: 40\nhumn: 1\n")
    assert day21.human_value(jobs) == 4


@pytest.mark.parametrize("mode, expected", [("part1", "6032"), ("part2", "5031")])
def test_day22_example(solve, mode: str, expected: str) -> None:
    assert solve(22, NOTES, "--mode", mode) == expected


def test_day22_cube_faces() -> None:
    board, _ = day22.parse_notes(NOTES)
    size, faces = day22.fold_cube(board)
    assert size == 4
    assert len({f.n for f in faces.values()}) == 6


def test_day22_cube_edge_crossing() -> None:
    board, _ = day22.parse_notes(NOTES)
    step = day22.cube_step(board)
    # walking right off face 4 at row 6 lands on face 6 heading down
    assert step(Point(11, 5), EAST) == (Point(14, 8), Point(0, 1))
    # and walking up off the top face re-enters on the left part of the net
    pos, facing = step(Point(8, 0), NORTH)
    assert facing == Point(0, 1) and pos.y == 4


def test_day22_password() -> None:
    assert day22.password(Point(7, 5), EAST) == 6032


@pytest.mark.parametrize("mode, expected", [("part1", "110"), ("part2", "20")])
def test_day23_example(solve, mode: str, expected: str) -> None:
    assert solve(23, ELVES, "--mode", mode) == expected


def test_day23_small_example_settles() -> None:
    elves = day23.parse_elves(SMALL_ELVES)
    assert day23.settle(elves) == 4
    for round_index in range(3):
        elves, _ = day23.spread(elves, round_index)
    assert day23.render(elves) == "..#..\n....#\n#....\n....#\n.....\n..#.."


@pytest.mark.parametrize("mode, expected", [("part1", "18"), ("part2", "54")])
def test_day24_example(solve, mode: str, expected: str) -> None:
    assert solve(24, VALLEY, "--mode", mode) == expected


def test_day25_sum(solve) -> None:
    assert solve(25, SNAFU) == "2=-1=0"


@pytest.mark.parametrize(
    "decimal, snafu",
    [(1, "1"), (3, "1="), (8, "2="), (20, "1-0"), (2022, "1=11-2"), (12345, "1-0---0"), (314159265, "1121-1110-1=0")],
)
def test_day25_conversions(decimal: int, snafu: str) -> None:
    assert day25.to_snafu(decimal) == snafu
    assert day25.from_snafu(snafu) == decimal


def test_day25_invalid_digit(solve) -> None:
    with pytest.raises(SystemExit):
        solve(25, "12\n1x\n")


def test_day21_division_truncates_toward_zero() -> None:
    jobs = day21.parse_jobs("root: a + b\na: c / d\nc: 7\nd: 2\nb: 1\n")
    assert day21.root_value(jobs) == 4
    jobs = day21.parse_jobs("root: a + b\na: c / d\nc: -7\nd: 2\nb: 1\n")
    assert day21.root_value(jobs) == -2


def test_day21_division_by_zero(solve) -> None:
    with pytest.raises(SystemExit):
        solve(21, "root: a / b\na: 3\nb: 0\n", "--mode", "part1")
