"""Locate the datapop.toml that applies to a working directory.

``DATAPOP_CONFIG`` pins one file and disables the search. Otherwise each
directory from the start upwards is checked for ``datapop.toml`` and then
the hidden ``.datapop.toml``; the nearest directory wins.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "datapop.toml"
HIDDEN_CONFIG_FILENAME = ".datapop.toml"
CONFIG_ENV_VAR = "DATAPOP_CONFIG"

_CANDIDATES = (CONFIG_FILENAME, HIDDEN_CONFIG_FILENAME)


def _directories(start: Path) -> Iterator[Path]:
    yield start
    yield from start.parents


def _pinned_config() -> Path | None:
    """The file named by the env var; a missing file means no config at all."""
    pinned = Path(os.environ[CONFIG_ENV_VAR])
    return pinned if pinned.is_file() else None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    if os.environ.get(CONFIG_ENV_VAR):
        return _pinned_config()

    for directory in _directories((start or Path.cwd()).resolve()):
        for name in _CANDIDATES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None
