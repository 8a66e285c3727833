"""Shared pytest fixtures for gildedrose tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from gildedrose.config.models import CatalogConfig
from gildedrose.domain.inventory import Inventory
from gildedrose.services.inventory import build_inventory


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation and binds handlers to
    the runner's temporary stderr.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rose = logging.getLogger("gildedrose")
    rose_level = rose.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rose.setLevel(rose_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``GILDEDROSE_*`` variables out of settings resolution."""
    monkeypatch.delenv("GILDEDROSE_CONFIG", raising=False)
    monkeypatch.delenv("GILDEDROSE_SIMULATION__DAYS", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so config discovery finds nothing by default.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``. Tests that write a
    ``gildedrose.toml`` can request ``tmp_path`` directly (same directory).
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def demo_inventory() -> Inventory:
    """Inventory holding the 11-item demonstration catalog."""
    return build_inventory(CatalogConfig().items)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write *text* to ``gildedrose.toml`` in ``tmp_path`` and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "gildedrose.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
