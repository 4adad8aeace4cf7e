"""Day 11: Monkey in the Middle."""

from __future__ import annotations

import logging
import math
import operator
import re
from dataclasses import dataclass
from typing import Callable

from ..constants import PART1, Mode
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

_BLOCK = re.compile(
    r"Monkey (?P<id>\d+):\s*"
    r"Starting items:(?P<items>[\d, ]*)\s*"
    r"Operation: new = old (?P<op>[*+]) (?P<arg>old|\d+)\s*"
    r"Test: divisible by (?P<div>\d+)\s*"
    r"If true: throw to monkey (?P<yes>\d+)\s*"
    r"If false: throw to monkey (?P<no>\d+)"
)
_OPS: dict[str, Callable[[int, int], int]] = {"+": operator.add, "*": operator.mul}


@dataclass
class Monkey:
    items: list[int]
    op: str
    arg: int | None  # None means "old"
    divisor: int
    if_true: int
    if_false: int
    inspected: int = 0

    def new_worry(self, old: int) -> int:
        return _OPS[self.op](old, old if self.arg is None else self.arg)


def parse_monkeys(text: str) -> list[Monkey]:
    blocks = [b.strip() for b in re.split(r"\n\s*\n", text.strip()) if b.strip()]
    if not blocks:
        raise PuzzleInputError("no monkeys in input")
    monkeys = []
    for index, block in enumerate(blocks):
        m = _BLOCK.fullmatch(block)
        if m is None:
            raise PuzzleInputError(f"cannot parse monkey block {index}: {block.splitlines()[0]!r}")
        if int(m["id"]) != index:
            raise PuzzleInputError(f"monkey {m['id']} listed in position {index}")
        monkeys.append(
            Monkey(
                items=[int(v) for v in m["items"].replace(",", " ").split()],
                op=m["op"],
                arg=None if m["arg"] == "old" else int(m["arg"]),
                divisor=int(m["div"]),
                if_true=int(m["yes"]),
                if_false=int(m["no"]),
            )
        )
    for index, monkey in enumerate(monkeys):
        for target in (monkey.if_true, monkey.if_false):
            if target >= len(monkeys) or target == index:
                raise PuzzleInputError(f"monkey {index} cannot throw to monkey {target}")
    return monkeys


def play(monkeys: list[Monkey], rounds: int, mode: Mode) -> None:
    """Run `rounds` rounds in place, updating `inspected` counts.

    Part 1 divides worry by 3 after each inspection. Part 2 keeps worry
    bounded modulo the product of all divisors, which preserves every test.
    """
    modulus = math.prod(m.divisor for m in monkeys)
    for rnd in range(1, rounds + 1):
        for monkey in monkeys:
            for worry in monkey.items:
                worry = monkey.new_worry(worry)
                worry = worry // 3 if mode == PART1 else worry % modulus
                target = monkey.if_true if worry % monkey.divisor == 0 else monkey.if_false
                monkeys[target].items.append(worry)
            monkey.inspected += len(monkey.items)
            monkey.items = []
        if logger.isEnabledFor(logging.DEBUG) and (rnd <= 20 or rnd % 1000 == 0):
            logger.debug("after round %d: inspected %s", rnd, [m.inspected for m in monkeys])


def monkey_business(monkeys: list[Monkey]) -> int:
    top = sorted((m.inspected for m in monkeys), reverse=True)[:2]
    return math.prod(top)


@guarded(11)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(11, "Level of monkey business after keep-away rounds.")
    ap.add_argument("--rounds", type=int, default=None, help="Number of rounds (default: 20 for part1, 10000 for part2).")
    args = parse_args(ap, 11, argv)

    rounds = args.rounds if args.rounds is not None else (20 if args.mode == PART1 else 10_000)
    if rounds < 0:
        raise SystemExit("--rounds must be >= 0")
    monkeys = parse_monkeys(read_input(args.input))
    play(monkeys, rounds, args.mode)
    return report(monkey_business(monkeys))


if __name__ == "__main__":
    raise SystemExit(main())
