"""Day 19: Not Enough Minerals.

Each blueprint is searched independently (depth-first, jumping straight to
the next robot built) so blueprints are farmed out to worker processes.
"""

from __future__ import annotations

import logging
import math
import os
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

_BLUEPRINT = re.compile(
    r"Blueprint (\d+):\s+"
    r"Each ore robot costs (\d+) ore\.\s+"
    r"Each clay robot costs (\d+) ore\.\s+"
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\.\s+"
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)

PART1_MINUTES = 24
PART2_MINUTES = 32
PART2_BLUEPRINTS = 3


@dataclass(frozen=True)
class Blueprint:
    id: int
    ore_robot: int
    clay_robot: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int


def parse_blueprints(text: str) -> list[Blueprint]:
    """Blueprints may span several lines; anything between them must be blank."""
    blueprints = []
    pos = 0
    for m in _BLUEPRINT.finditer(text):
        if text[pos : m.start()].strip():
            raise PuzzleInputError(f"unrecognised text before blueprint {m[1]}: {text[pos:m.start()].strip()[:40]!r}")
        blueprints.append(Blueprint(*map(int, m.groups())))
        pos = m.end()
    if text[pos:].strip():
        raise PuzzleInputError(f"unrecognised trailing text {text[pos:].strip()[:40]!r}")
    if not blueprints:
        raise PuzzleInputError("no blueprints in input")
    return blueprints


def _wait(cost: int, have: int, rate: int) -> int:
    # minutes of collecting before `cost` is affordable
    return 0 if have >= cost else -(-(cost - have) // rate)


def max_geodes(bp: Blueprint, minutes: int) -> int:
    """Most geodes `bp` can open in `minutes`, starting with one ore robot."""
    max_ore = max(bp.ore_robot, bp.clay_robot, bp.obsidian_robot_ore, bp.geode_robot_ore)
    best = 0

    def search(left: int, r_ore: int, r_clay: int, r_obs: int, ore: int, clay: int, obs: int, geodes: int) -> None:
        nonlocal best
        best = max(best, geodes)
        # even a new geode robot every remaining minute cannot beat `best`
        if geodes + left * (left - 1) // 2 <= best:
            return
        if r_obs:
            t = max(_wait(bp.geode_robot_ore, ore, r_ore), _wait(bp.geode_robot_obsidian, obs, r_obs)) + 1
            if t < left:
                search(
                    left - t, r_ore, r_clay, r_obs,
                    ore + r_ore * t - bp.geode_robot_ore, clay + r_clay * t, obs + r_obs * t - bp.geode_robot_obsidian,
                    geodes + left - t,
                )
        if r_clay and r_obs < bp.geode_robot_obsidian:
            t = max(_wait(bp.obsidian_robot_ore, ore, r_ore), _wait(bp.obsidian_robot_clay, clay, r_clay)) + 1
            if t < left:
                search(
                    left - t, r_ore, r_clay, r_obs + 1,
                    ore + r_ore * t - bp.obsidian_robot_ore, clay + r_clay * t - bp.obsidian_robot_clay, obs + r_obs * t,
                    geodes,
                )
        if r_clay < bp.obsidian_robot_clay:
            t = _wait(bp.clay_robot, ore, r_ore) + 1
            if t < left:
                search(left - t, r_ore, r_clay + 1, r_obs, ore + r_ore * t - bp.clay_robot, clay + r_clay * t, obs + r_obs * t, geodes)
        if r_ore < max_ore:
            t = _wait(bp.ore_robot, ore, r_ore) + 1
            if t < left:
                search(left - t, r_ore + 1, r_clay, r_obs, ore + r_ore * t - bp.ore_robot, clay + r_clay * t, obs + r_obs * t, geodes)

    search(minutes, 1, 0, 0, 0, 0, 0, 0)
    return best


def geodes_per_blueprint(blueprints: list[Blueprint], minutes: int, jobs: int = 1) -> dict[int, int]:
    """Map blueprint id to its best geode count, optionally using `jobs` processes."""
    if jobs <= 1 or len(blueprints) <= 1:
        return {bp.id: max_geodes(bp, minutes) for bp in blueprints}

    results: dict[int, int] = {}
    with ProcessPoolExecutor(max_workers=min(jobs, len(blueprints))) as ex:
        futs = {ex.submit(max_geodes, bp, minutes): bp.id for bp in blueprints}
        for fut in as_completed(futs):
            results[futs[fut]] = fut.result()
            logger.debug("blueprint %d: %d geodes", futs[fut], results[futs[fut]])
    return results


def quality_level_sum(blueprints: list[Blueprint], jobs: int = 1) -> int:
    geodes = geodes_per_blueprint(blueprints, PART1_MINUTES, jobs)
    return sum(bp_id * count for bp_id, count in geodes.items())


def first_blueprints_product(blueprints: list[Blueprint], jobs: int = 1) -> int:
    geodes = geodes_per_blueprint(blueprints[:PART2_BLUEPRINTS], PART2_MINUTES, jobs)
    return math.prod(geodes.values())


@guarded(19)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(19, "Geodes that robot-factory blueprints can open.")
    ap.add_argument("--jobs", type=int, default=os.cpu_count() or 1, help="Worker processes (1 runs inline).")
    args = parse_args(ap, 19, argv)
    if args.jobs < 1:
        raise SystemExit("--jobs must be >= 1")
    blueprints = parse_blueprints(read_input(args.input))
    if args.mode == PART1:
        return report(quality_level_sum(blueprints, args.jobs))
    return report(first_blueprints_product(blueprints, args.jobs))


if __name__ == "__main__":
    raise SystemExit(main())
