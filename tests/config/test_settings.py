"""Tests for BiclogSettings — flags, env vars and the TOML config file."""

from pathlib import Path

import click
import pytest

from biclog.config.settings import BiclogSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = BiclogSettings.from_cli(home=tmp_path)
        assert settings.data_file == ""
        assert settings.data_path is None
        assert settings.verbose is False
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.config_path is None
        assert settings.display.separator == "  "

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BiclogSettings.from_cli(home=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_user_config(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text('data_file = "/data/bikes.db"\nverbose = true\n')
        settings = BiclogSettings.from_cli(home=tmp_path)
        assert settings.data_file == "/data/bikes.db"
        assert settings.data_path == Path("/data/bikes.db")
        assert settings.verbose is True
        assert settings.config_path == tmp_path / ".biclog.toml"

    def test_display_section(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text('[display]\nseparator = " | "\n')
        settings = BiclogSettings.from_cli(home=tmp_path)
        assert settings.display.separator == " | "

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('data_file = "custom.db"\n')
        settings = BiclogSettings.from_cli(config_path=str(custom), home=tmp_path)
        assert settings.data_file == "custom.db"
        assert settings.config_path == custom

    def test_explicit_config_missing(self, tmp_path: Path) -> None:
        with pytest.raises(click.UsageError):
            BiclogSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text("data_file = \n")
        with pytest.raises(click.UsageError):
            BiclogSettings.from_cli(home=tmp_path)

    def test_wrong_value_type(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text('verbose = "maybe"\n')
        with pytest.raises(click.UsageError) as exc_info:
            BiclogSettings.from_cli(home=tmp_path)
        assert "verbose" in exc_info.value.message
        assert ".biclog.toml" in exc_info.value.message

    def test_wrong_nested_value_type(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text("[display]\nseparator = 3\n")
        with pytest.raises(click.UsageError) as exc_info:
            BiclogSettings.from_cli(home=tmp_path)
        assert "display.separator" in exc_info.value.message

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text('colour = "blue"\n')
        assert BiclogSettings.from_cli(home=tmp_path).data_file == ""

    def test_data_path_expands_user(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text('data_file = "~/bikes.db"\n')
        settings = BiclogSettings.from_cli(home=tmp_path)
        assert settings.data_path == Path.home() / "bikes.db"


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".biclog.toml").write_text('data_file = "toml.db"\n')
        monkeypatch.setenv("BICLOG_DATA_FILE", "env.db")
        assert BiclogSettings.from_cli(home=tmp_path).data_file == "env.db"

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BICLOG_DATA_FILE", "env.db")
        settings = BiclogSettings.from_cli(home=tmp_path, data_file="cli.db")
        assert settings.data_file == "cli.db"

    def test_unset_flag_keeps_toml_value(self, tmp_path: Path) -> None:
        (tmp_path / ".biclog.toml").write_text("verbose = true\n")
        settings = BiclogSettings.from_cli(home=tmp_path, verbose=None, data_file=None)
        assert settings.verbose is True

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = BiclogSettings.from_cli(home=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True
