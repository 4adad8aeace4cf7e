import json
from pathlib import Path

import pytest

from aoc2022.config import config_to_argv, day_section, default_config_path, flatten_mapping


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_day_section() -> None:
    assert day_section(7) == "day07"
    assert day_section(25) == "day25"


def test_flatten_mapping_joins_nested_keys() -> None:
    assert flatten_mapping({"plot": {"path": "a.png"}, "rounds": 3}) == {"plot_path": "a.png", "rounds": 3}


def test_args_list_is_passed_through(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", {"args": ["--mode", "part2", 5]})
    assert config_to_argv(path) == ["--mode", "part2", "5"]


def test_args_must_be_a_list(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", {"args": "--mode part2"})
    with pytest.raises(TypeError):
        config_to_argv(path)


def test_args_cannot_load_another_config(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", {"args": ["--config=other.json"]})
    with pytest.raises(ValueError):
        config_to_argv(path)


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", [1, 2])
    with pytest.raises(TypeError):
        config_to_argv(path)


def test_mapping_values_become_flags(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", {"mode": "part1", "verbose": True, "quiet": False, "num_knots": 4, "skip": None})
    assert config_to_argv(path) == ["--mode", "part1", "--verbose", "--num-knots", "4"]


def test_day_section_is_selected(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", {"day15": {"param": 10}, "day11": {"rounds": 5}})
    assert config_to_argv(path, section_keys=("day15",)) == ["--param", "10"]


def test_other_day_sections_are_ignored(tmp_path: Path) -> None:
    path = _write(tmp_path / "c.json", {"mode": "part2", "day11": {"rounds": 5}})
    assert config_to_argv(path, section_keys=("day15",)) == ["--mode", "part2"]


def test_yaml_config(tmp_path: Path) -> None:
    pytest.importorskip("yaml")
    path = tmp_path / "c.yaml"
    path.write_text("day09:\n  num_knots: 3\n  mode: part1\n", encoding="utf-8")
    assert config_to_argv(path, section_keys=("day09",)) == ["--num-knots", "3", "--mode", "part1"]


def test_default_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    (tmp_path / "configs").mkdir()
    _write(tmp_path / "configs" / "day01.json", {"mode": "part2"})
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert default_config_path("day01.json") == (tmp_path / "configs" / "day01.json").resolve()
    assert default_config_path("day02.json") is None
