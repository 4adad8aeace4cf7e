"""Day 10: Cathode-Ray Tube."""

from __future__ import annotations

import logging
from typing import Iterator

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)
CRT_WIDTH = 40
CRT_HEIGHT = 6
LIT = "#"
DARK = "."


def parse_program(text: str) -> list[int | None]:
    """`None` for `noop`, the operand for `addx V`."""
    program: list[int | None] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if fields == ["noop"]:
            program.append(None)
        elif len(fields) == 2 and fields[0] == "addx":
            try:
                program.append(int(fields[1]))
            except ValueError as exc:
                raise PuzzleInputError(f"addx needs an integer, got {fields[1]!r}", line=lineno) from exc
        else:
            raise PuzzleInputError(f"unknown instruction {line!r}", line=lineno)
    return program


def register_values(program: list[int | None]) -> Iterator[tuple[int, int]]:
    """Yield `(cycle, X)` with X being the register value *during* that cycle."""
    x = 1
    cycle = 1
    for operand in program:
        yield cycle, x
        cycle += 1
        if operand is not None:
            yield cycle, x
            cycle += 1
            x += operand


def signal_strength(program: list[int | None]) -> int:
    return sum(cycle * x for cycle, x in register_values(program) if cycle in SAMPLE_CYCLES)


def render_crt(program: list[int | None]) -> list[str]:
    """Draw the screen; a pixel is lit when the 3-wide sprite covers it."""
    pixels = [DARK] * (CRT_WIDTH * CRT_HEIGHT)
    for cycle, x in register_values(program):
        pos = cycle - 1
        if pos >= len(pixels):
            logger.debug("program runs past the last pixel (cycle %d)", cycle)
            break
        if abs(pos % CRT_WIDTH - x) <= 1:
            pixels[pos] = LIT
    return ["".join(pixels[row * CRT_WIDTH : (row + 1) * CRT_WIDTH]) for row in range(CRT_HEIGHT)]


@guarded(10)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(10, "Signal strengths and CRT output of a tiny CPU.")
    args = parse_args(ap, 10, argv)
    program = parse_program(read_input(args.input))
    if args.mode == PART1:
        return report(signal_strength(program))
    return report("\n".join(render_crt(program)))


if __name__ == "__main__":
    raise SystemExit(main())
