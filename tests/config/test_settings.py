"""Tests for RoseSettings — unified settings with TOML source."""

from collections.abc import Callable
from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from gildedrose.config.settings import RoseSettings


@pytest.mark.usefixtures("_isolated_cwd")
class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = RoseSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.simulation.days == 4
        assert len(settings.catalog.items) == 11

    def test_frozen(self) -> None:
        settings = RoseSettings.from_cli()
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("_isolated_cwd")
class TestTomlSource:
    def test_loads_from_toml(self, write_config: Callable[[str], Path]) -> None:
        path = write_config("[simulation]\ndays = 7\n")
        settings = RoseSettings.from_cli()
        assert settings.config_path == path
        assert settings.simulation.days == 7
        assert settings.plugins.enabled is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        other = tmp_path / "shop.toml"
        other.write_text("[plugins]\nenabled = false\n")
        settings = RoseSettings.from_cli(config_path=str(other))
        assert settings.plugins.enabled is False

    def test_explicit_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = RoseSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.simulation.days == 4

    def test_invalid_toml(self, write_config: Callable[[str], Path]) -> None:
        write_config("[simulation\ndays = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RoseSettings.from_cli()

    def test_negative_days_rejected(self, write_config: Callable[[str], Path]) -> None:
        write_config("[simulation]\ndays = -2\n")
        with pytest.raises(ValidationError):
            RoseSettings.from_cli()


@pytest.mark.usefixtures("_isolated_cwd")
class TestPriority:
    def test_env_overrides_toml(
        self, write_config: Callable[[str], Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config("[simulation]\ndays = 7\n")
        monkeypatch.setenv("GILDEDROSE_SIMULATION__DAYS", "12")
        assert RoseSettings.from_cli().simulation.days == 12

    def test_cli_flags_override(self) -> None:
        settings = RoseSettings.from_cli(json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True
