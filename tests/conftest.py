from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from aoc2022.days import load_day


@pytest.fixture
def solve(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> Callable[..., str]:
    """Run a day's CLI on `text` and return what it printed (stripped)."""

    def _solve(day: int, text: str, *argv: str) -> str:
        path = tmp_path / f"input{day:02d}.txt"
        path.write_text(text, encoding="utf-8")
        capsys.readouterr()
        assert load_day(day).main(["--no-config", "-i", str(path), *argv]) == 0
        return capsys.readouterr().out.strip()

    return _solve
