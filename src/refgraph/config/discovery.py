"""Locate ``refgraph.toml``.

``REFGRAPH_CONFIG`` names the file outright. Otherwise the search starts
in a directory and climbs towards the filesystem root, the way git finds
``.git/``; the nearest file wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "refgraph.toml"
CONFIG_ENV_VAR = "REFGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``REFGRAPH_CONFIG`` pointing at a missing file disables discovery
    instead of falling back to the walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
