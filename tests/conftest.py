"""Shared pytest fixtures and test helpers for biclog tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from biclog.infrastructure.datafile import DataFile

_ENV_VARS = (
    "BICLOG_CONFIG",
    "BICLOG_DATA_FILE",
    "BICLOG_VERBOSE",
    "BICLOG_QUIET",
    "BICLOG_JSON_OUTPUT",
    "BICLOG_LOG_JSON",
    "BICLOG_DISPLAY__SEPARATOR",
)


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the user's config file, env vars and logging setup out of tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Path for a data file that does not exist yet."""
    return tmp_path / "bikes.db"


@pytest.fixture
def data_file(data_path: Path) -> Iterator[DataFile]:
    """Freshly created, empty data file."""
    df = DataFile.create_new(data_path)
    try:
        yield df
    finally:
        df.close()


@pytest.fixture
def initialized_path(data_path: Path) -> Path:
    """Path of an empty data file that has been created and closed again."""
    DataFile.create_new(data_path).close()
    return data_path
