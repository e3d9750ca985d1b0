"""Locate ``scaffoldctl.toml``.

``SCAFFOLDCTL_CONFIG`` names the file outright. Without it, the nearest
``scaffoldctl.toml`` in the start directory or any of its ancestors is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "scaffoldctl.toml"
CONFIG_ENV_VAR = "SCAFFOLDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    An env var pointing at a missing file disables discovery entirely.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        named = Path(override)
        return named if named.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
