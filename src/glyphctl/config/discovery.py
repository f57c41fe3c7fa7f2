"""Config file discovery and loading.

Two file forms are recognized while walking up from the working
directory, closest match wins:

* ``glyphctl.toml`` with top-level ``[engine]``, ``[quality]``, ... tables
* ``pyproject.toml`` carrying the same tables under ``[tool.glyphctl]``

``GLYPHCTL_CONFIG`` (env) and ``--config`` (CLI) point at a file
directly and skip the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from glyphctl.config.models import GlyphConfig

CONFIG_FILENAME = "glyphctl.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "GLYPHCTL_CONFIG"


def _pyproject_has_table(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("glyphctl"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file above *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_table(pyproject):
            return pyproject
    return None


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the glyphctl tables it holds.

    Raises :class:`tomllib.TOMLDecodeError` on malformed TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("glyphctl", {})
        return table if isinstance(table, dict) else {}
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> GlyphConfig:
    """Load and validate config, discovering the file when *path* is None."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return GlyphConfig()
    return GlyphConfig.model_validate(read_config_table(path))
