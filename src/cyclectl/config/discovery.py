"""Locate cyclectl.toml.

``CYCLECTL_CONFIG`` names the file directly. Otherwise the search walks
up from the starting directory, the way git looks for ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "cyclectl.toml"
CONFIG_ENV_VAR = "CYCLECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A ``CYCLECTL_CONFIG`` that points at a missing file yields None; the
    walk-up search is not tried in that case.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
