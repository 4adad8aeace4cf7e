"""Exceptions shared by the puzzle parsers and solvers."""

from __future__ import annotations


class PuzzleInputError(ValueError):
    """Raised when puzzle input is malformed or admits no answer.

    The runner turns this into a one-line diagnostic on stderr and a
    non-zero exit status.
    """

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
