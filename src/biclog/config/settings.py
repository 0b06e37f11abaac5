"""Unified settings — CLI flags, env vars, and the TOML config file.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BICLOG_*`` prefix
  3. TOML file    — ``~/.biclog.toml`` or an explicit ``--config``
  4. Code defaults

The settings object is built once per invocation and handed to commands
through the Click context. Services only ever see the resolved data
file path.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from biclog.config.discovery import find_config
from biclog.config.models import DisplayConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a TOML config file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.UsageError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class BiclogSettings(BaseSettings):
    """Settings for one biclog invocation.

    Attributes:
        data_file: Data file path; empty when neither flag nor config sets it.
        config_path: The config file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BICLOG_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    data_file: str = ""
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        home: Path | None = None,
        **cli_flags: Any,
    ) -> BiclogSettings:
        """Construct settings from a CLI invocation.

        Reads the explicit *config_path* if given, otherwise the
        discovered user config. Flags whose value is None are left to the
        lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path).expanduser()
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.UsageError(msg)
            toml_path = p
        else:
            toml_path = find_config(home)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            where = f" (config file {toml_path})" if toml_path else ""
            msg = f"Invalid settings{where}: {problems}"
            raise click.UsageError(msg) from exc
        finally:
            _tls.toml_path = None

    @property
    def data_path(self) -> Path | None:
        """The data file as a Path, or None when unset."""
        return Path(self.data_file).expanduser() if self.data_file else None
