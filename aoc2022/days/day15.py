"""Day 15: Beacon Exclusion Zone.

Every sensor excludes a diamond (Manhattan ball) reaching its closest beacon.
`--param` is the inspected row for part 1 and the search-area size for part 2.
"""

from __future__ import annotations

import itertools
import logging
import re
from dataclasses import dataclass
from typing import Iterable

from ..aoclib import Point
from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

_SENSOR = re.compile(r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)")

ROW = 2_000_000
SEARCH_MAX = 4_000_000
FREQUENCY_FACTOR = 4_000_000


@dataclass(frozen=True)
class Sensor:
    position: Point
    beacon: Point

    @property
    def radius(self) -> int:
        return self.position.manhattan_distance_to(self.beacon)

    def covers(self, p: Point) -> bool:
        return self.position.manhattan_distance_to(p) <= self.radius


def parse_sensors(text: str) -> list[Sensor]:
    sensors = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        m = _SENSOR.fullmatch(line)
        if m is None:
            raise PuzzleInputError(f"unrecognised sensor report {line!r}", line=lineno)
        sx, sy, bx, by = map(int, m.groups())
        sensors.append(Sensor(Point(sx, sy), Point(bx, by)))
    if not sensors:
        raise PuzzleInputError("no sensors in input")
    return sensors


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Union of closed integer intervals, sorted and non-adjacent."""
    merged: list[tuple[int, int]] = []
    for lo, hi in sorted(intervals):
        if merged and lo <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


def row_coverage(sensors: list[Sensor], row: int) -> list[tuple[int, int]]:
    spans = []
    for s in sensors:
        reach = s.radius - abs(s.position.y - row)
        if reach >= 0:
            spans.append((s.position.x - reach, s.position.x + reach))
    return merge_intervals(spans)


def excluded_on_row(sensors: list[Sensor], row: int) -> int:
    """Positions on `row` where no beacon can be."""
    coverage = row_coverage(sensors, row)
    covered = sum(hi - lo + 1 for lo, hi in coverage)
    beacons = {s.beacon.x for s in sensors if s.beacon.y == row}
    covered -= sum(1 for x in beacons if any(lo <= x <= hi for lo, hi in coverage))
    return covered


def _candidates(sensors: list[Sensor], limit: int) -> Iterable[Point]:
    # a lone uncovered cell sits just outside several diamonds, so it lies on
    # the intersection of their boundary lines x+y=a and x-y=b (or in a corner)
    ups: set[int] = set()
    downs: set[int] = set()
    for s in sensors:
        r = s.radius + 1
        px, py = s.position.x, s.position.y
        ups.update((px + py - r, px + py + r))
        downs.update((px - py - r, px - py + r))
    for a, b in itertools.product(ups, downs):
        if (a + b) % 2 == 0:
            yield Point((a + b) // 2, (a - b) // 2)
    yield from (Point(0, 0), Point(0, limit), Point(limit, 0), Point(limit, limit))


def find_distress_beacon(sensors: list[Sensor], limit: int) -> Point:
    for p in _candidates(sensors, limit):
        if 0 <= p.x <= limit and 0 <= p.y <= limit and not any(s.covers(p) for s in sensors):
            return p
    logger.warning("no boundary intersection is free; scanning all %d rows", limit + 1)
    for row in range(limit + 1):
        x = 0
        for lo, hi in row_coverage(sensors, row):
            if lo > x:
                break
            x = max(x, hi + 1)
        if x <= limit:
            return Point(x, row)
    raise PuzzleInputError(f"no uncovered position within [0, {limit}]")


def tuning_frequency(p: Point) -> int:
    return p.x * FREQUENCY_FACTOR + p.y


@guarded(15)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(15, "Locate positions a beacon cannot occupy.")
    ap.add_argument(
        "--param",
        type=int,
        default=None,
        help=f"Row to inspect (part1, default {ROW}) or search bound (part2, default {SEARCH_MAX}).",
    )
    args = parse_args(ap, 15, argv)
    sensors = parse_sensors(read_input(args.input))
    if args.mode == PART1:
        return report(excluded_on_row(sensors, ROW if args.param is None else args.param))
    beacon = find_distress_beacon(sensors, SEARCH_MAX if args.param is None else args.param)
    logger.debug("distress beacon at %s", beacon)
    return report(tuning_frequency(beacon))


if __name__ == "__main__":
    raise SystemExit(main())
