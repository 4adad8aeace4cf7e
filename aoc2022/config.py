"""Per-day default flags loaded from configuration files.

A day reads `configs/dayNN.json` (or `.yaml`) under the repository root when
it exists, or any file passed with `--config`. The file is converted to argv
tokens that are placed *before* the real command line, so flags typed by the
user always win.

Supported formats:
- JSON (always)
- YAML (optional; requires the `yaml` extra, i.e. `pyyaml`)

Supported shapes:
- {"args": ["--mode", "part2", "--verbose"]}        # explicit argv
- {"day15": {"mode": "part1", "param": 10}}          # per-day section
- {"rounds": 20, "plot": {"path": "trail.png"}}      # mapping (nested keys joined with '_')
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterable

_DAY_SECTION = re.compile(r"day\d{2}")


def repo_root_from_cwd() -> Path:
    """Return the nearest directory (cwd or a parent) holding `pyproject.toml`."""
    cwd = Path.cwd().resolve()
    for cand in (cwd, *cwd.parents):
        if (cand / "pyproject.toml").is_file():
            return cand
    return cwd


def default_config_path(filename: str) -> Path | None:
    """Return `configs/<filename>` under the repo root if that file exists."""
    path = (repo_root_from_cwd() / "configs" / filename).resolve()
    return path if path.is_file() else None


def day_section(day: int) -> str:
    """Section key used for `day` inside a shared config file (`day07`)."""
    return f"day{day:02d}"


def load_config_file(path: Path) -> Any:
    """Parse a JSON or YAML config file."""
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover
            raise SystemExit(f"YAML config requires pyyaml (pip install 'aoc2022[yaml]'): {exc}") from exc
        return yaml.safe_load(raw)
    return json.loads(raw)


def flatten_mapping(mapping: dict[str, Any]) -> dict[str, Any]:
    """Flatten nested keys by joining with '_' (`{"plot": {"path": x}}` -> `plot_path`)."""
    out: dict[str, Any] = {}

    def _walk(prefix: str, obj: dict[str, Any]) -> None:
        for key, value in obj.items():
            name = str(key).strip()
            if not name:
                continue
            if prefix:
                name = f"{prefix}_{name}"
            if isinstance(value, dict):
                _walk(name, value)
            else:
                out[name] = value

    _walk("", mapping)
    return out


def _as_flag(key: str) -> str:
    return key if key.startswith("-") else "--" + key.replace("_", "-")


def config_to_argv(config_path: Path, *, section_keys: Iterable[str] = ()) -> list[str]:
    """Convert a config file into argv-like tokens.

    Args:
        config_path: JSON/YAML file to read.
        section_keys: Candidate top-level sections; the first one holding a
            mapping is used instead of the whole document.

    Returns:
        Tokens meant to be prepended to the command line.

    Raises:
        TypeError: If the document (or its `args` entry) has the wrong shape.
        ValueError: If `args` tries to load another config.
    """
    data = load_config_file(config_path)

    if isinstance(data, dict) and "args" in data:
        args = data["args"]
        if not isinstance(args, list):
            raise TypeError(f"{config_path}: expected 'args' to be a list, got {type(args).__name__}")
        argv = [str(tok) for tok in args]
        if any(tok == "--config" or tok.startswith("--config=") for tok in argv):
            raise ValueError(f"{config_path}: 'args' must not include --config")
        return argv

    if not isinstance(data, dict):
        raise TypeError(f"{config_path}: expected a mapping at top-level, got {type(data).__name__}")

    section = next((data[key] for key in section_keys if isinstance(data.get(key), dict)), None)
    if section is None:
        # sections addressed to other days are not flags for this one
        section = {k: v for k, v in data.items() if not (isinstance(v, dict) and _DAY_SECTION.fullmatch(str(k)))}

    argv: list[str] = []
    for key, value in flatten_mapping(section).items():
        if key in {"config", "args"} or value is None:
            continue
        flag = _as_flag(key)
        if isinstance(value, bool):
            if value:
                argv.append(flag)
        elif isinstance(value, (list, tuple)):
            argv.extend([flag, ",".join(str(v) for v in value)])
        else:
            argv.extend([flag, str(value)])
    return argv
