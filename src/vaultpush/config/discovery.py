"""Locate ``vaultpush.toml`` for the current vault.

``VAULTPUSH_CONFIG`` names the file outright; otherwise the nearest
``vaultpush.toml`` in the start directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "vaultpush.toml"
CONFIG_ENV_VAR = "VAULTPUSH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
