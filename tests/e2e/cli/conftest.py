"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the CLI's logging.basicConfig(force=True) after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def db_url(tmp_path, monkeypatch) -> str:
    """Point GROUPJOIN_DB_URL at a fresh SQLite file."""
    url = f"sqlite+pysqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("GROUPJOIN_DB_URL", url)
    return url


@pytest.fixture
def runner(tmp_path, monkeypatch) -> CliRunner:
    """CliRunner with the flight recorder writing under tmp_path."""
    monkeypatch.setenv("GROUPJOIN_LOG_PATH", str(tmp_path / "latest.log"))
    return CliRunner()
