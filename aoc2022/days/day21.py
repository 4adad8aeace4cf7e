"""Day 21: Monkey Math.

Jobs form an expression tree rooted at `root`. Monkeys do integer arithmetic
(division truncates toward zero); solving for `humn` works backwards with
`fractions.Fraction` so an inexact inversion is detected instead of rounded.
"""

from __future__ import annotations

import logging
import operator
import re
from fractions import Fraction
from typing import Callable, Union

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

_JOB = re.compile(r"(\w+): (?:(-?\d+)|(\w+) ([-+*/]) (\w+))")


def _divide(a: int, b: int) -> int:
    return int(Fraction(a, b))


_OPS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}

ROOT = "root"
HUMAN = "humn"

Job = Union[int, tuple[str, str, str]]


def parse_jobs(text: str) -> dict[str, Job]:
    jobs: dict[str, Job] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        m = _JOB.fullmatch(line)
        if m is None:
            raise PuzzleInputError(f"unrecognised job {line!r}", line=lineno)
        name, number, left, op, right = m.groups()
        if name in jobs:
            raise PuzzleInputError(f"monkey {name} listed twice", line=lineno)
        jobs[name] = int(number) if number is not None else (left, op, right)
    for name, job in jobs.items():
        if isinstance(job, tuple):
            for ref in (job[0], job[2]):
                if ref not in jobs:
                    raise PuzzleInputError(f"monkey {name} waits for unknown monkey {ref}")
    if ROOT not in jobs:
        raise PuzzleInputError(f"no {ROOT} monkey")
    return jobs


class Evaluator:
    """Memoised evaluation of the job tree."""

    def __init__(self, jobs: dict[str, Job]) -> None:
        self.jobs = jobs
        self._values: dict[str, int] = {}
        self._needs_human: dict[str, bool] = {}

    def value(self, name: str) -> int:
        if name not in self._values:
            job = self.jobs[name]
            if isinstance(job, int):
                self._values[name] = job
            else:
                left, op, right = job
                try:
                    self._values[name] = _OPS[op](self.value(left), self.value(right))
                except ZeroDivisionError as exc:
                    raise PuzzleInputError(f"monkey {name} divides by zero") from exc
        return self._values[name]

    def needs_human(self, name: str) -> bool:
        if name not in self._needs_human:
            job = self.jobs[name]
            self._needs_human[name] = name == HUMAN or (
                isinstance(job, tuple) and (self.needs_human(job[0]) or self.needs_human(job[2]))
            )
        return self._needs_human[name]


def _as_int(value: Fraction, what: str) -> int:
    if value.denominator != 1:
        raise PuzzleInputError(f"{what} is not an integer: {value}")
    return value.numerator


def root_value(jobs: dict[str, Job]) -> int:
    return Evaluator(jobs).value(ROOT)


def human_value(jobs: dict[str, Job]) -> int:
    """Number `humn` must yell so that both operands of `root` are equal.

    Walks from `root` down to `humn`, undoing one operation per level. Only
    one operand of every node on that path may depend on `humn`.
    """
    if HUMAN not in jobs:
        raise PuzzleInputError(f"no {HUMAN} monkey")
    root = jobs[ROOT]
    if not isinstance(root, tuple):
        raise PuzzleInputError(f"{ROOT} must compare two monkeys")
    ev = Evaluator(jobs)
    name = ROOT
    target: Fraction | None = None
    while name != HUMAN:
        job = jobs[name]
        assert isinstance(job, tuple)
        left, op, right = job
        if ev.needs_human(left) and ev.needs_human(right):
            raise PuzzleInputError(f"monkey {name} depends on {HUMAN} through both operands")
        if not ev.needs_human(left) and not ev.needs_human(right):
            raise PuzzleInputError(f"{ROOT} does not depend on {HUMAN}")
        human_left = ev.needs_human(left)
        known = ev.value(right if human_left else left)
        if target is None:
            target = Fraction(known)
        elif op == "+":
            target = target - known
        elif op == "*":
            if known == 0:
                raise PuzzleInputError(f"monkey {name} multiplies by zero; {HUMAN} is not determined")
            target = target / known
        elif op == "-":
            target = target + known if human_left else known - target
        else:
            if human_left:
                target = target * known
            elif target == 0:
                raise PuzzleInputError(f"monkey {name} would need a division result of zero")
            else:
                target = known / target
        name = left if human_left else right
        logger.debug("%s must yield %s", name, target)
    return _as_int(target, HUMAN) if target is not None else 0


@guarded(21)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(21, "Numbers yelled by the monkeys.")
    args = parse_args(ap, 21, argv)
    jobs = parse_jobs(read_input(args.input))
    return report(root_value(jobs) if args.mode == PART1 else human_value(jobs))


if __name__ == "__main__":
    raise SystemExit(main())
