"""Day 25: Full of Hot Air.

SNAFU numbers are base 5 with digits `=` (-2), `-` (-1), `0`, `1` and `2`.
"""

from __future__ import annotations

from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
SYMBOLS = {v: k for k, v in DIGITS.items()}


def from_snafu(text: str) -> int:
    value = 0
    for ch in text:
        if ch not in DIGITS:
            raise PuzzleInputError(f"invalid SNAFU digit {ch!r} in {text!r}")
        value = value * 5 + DIGITS[ch]
    return value


def to_snafu(value: int) -> str:
    if value < 0:
        raise ValueError(f"negative values are not supported: {value}")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 5)
        if rem > 2:
            rem -= 5
            value += 1
        digits.append(SYMBOLS[rem])
    return "".join(reversed(digits))


def snafu_sum(text: str) -> str:
    numbers = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            numbers.append(from_snafu(line))
        except PuzzleInputError as exc:
            raise PuzzleInputError(str(exc), line=lineno) from exc
    total = sum(numbers)
    if total < 0:
        raise PuzzleInputError(f"the fuel total is negative ({total})")
    return to_snafu(total)


@guarded(25)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(25, "Sum of the fuel requirements, in SNAFU.", with_mode=False)
    args = parse_args(ap, 25, argv)
    return report(snafu_sum(read_input(args.input)))


if __name__ == "__main__":
    raise SystemExit(main())
