"""Config file discovery.

``staffctl.toml`` is looked up the way git looks for ``.git/``: in the
start directory, then in each parent up to the filesystem root. The
``STAFFCTL_CONFIG`` environment variable short-circuits the search.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "staffctl.toml"
CONFIG_ENV_VAR = "STAFFCTL_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    """*start* (resolved) followed by each of its ancestors."""
    resolved = start.resolve()
    yield resolved
    yield from resolved.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    When ``STAFFCTL_CONFIG`` is set it wins outright, and a path that does
    not name a file means "no config" rather than falling back to the walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
