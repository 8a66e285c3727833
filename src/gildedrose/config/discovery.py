"""Locate ``gildedrose.toml`` for the settings layer.

``GILDEDROSE_CONFIG`` names a file directly. Otherwise the catalog file is
looked up in the working directory and then each parent in turn, so a
simulation can be run from anywhere inside a project tree.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "gildedrose.toml"
CONFIG_ENV_VAR = "GILDEDROSE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the catalog config file that applies to *start* (default: cwd).

    An unset or empty ``GILDEDROSE_CONFIG`` falls back to the walk-up search;
    a set variable pointing at a missing file yields None.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _ancestors((start or Path.cwd()).resolve()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _ancestors(directory: Path) -> Iterator[Path]:
    yield directory
    yield from directory.parents
