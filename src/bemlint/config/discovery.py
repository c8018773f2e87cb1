"""Locate the configuration file for a project.

Search order, nearest directory first:

1. ``BEMLINT_CONFIG`` names the file outright (no walk-up).
2. ``bemlint.toml`` in the directory.
3. ``pyproject.toml`` in the directory, if it has a ``[tool.bemlint]`` table.

The directory holding the winning file is the project root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

CONFIG_FILENAME = "bemlint.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "BEMLINT_CONFIG"


def _declares_bemlint(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        # A broken pyproject belongs to some other tool; keep walking.
        return False
    return isinstance(data.get("tool", {}).get("bemlint"), dict)


def _candidates(directory: Path) -> list[Path]:
    return [directory / CONFIG_FILENAME, directory / PYPROJECT_FILENAME]


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for folder in (directory, *directory.parents):
        dedicated, pyproject = _candidates(folder)
        if dedicated.is_file():
            return dedicated
        if pyproject.is_file() and _declares_bemlint(pyproject):
            return pyproject
    return None


def config_section(data: dict[str, object], path: Path) -> dict[str, object]:
    """Pick the bemlint settings out of parsed TOML *data* read from *path*."""
    if path.name != PYPROJECT_FILENAME:
        return data
    section = data.get("tool", {})
    section = section.get("bemlint", {}) if isinstance(section, dict) else {}
    return section if isinstance(section, dict) else {}
