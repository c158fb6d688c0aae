"""Tests for CLI logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from typer.testing import CliRunner

from rotina.cli import base
from rotina.cli.main import app
from rotina.global_config import LOG_LEVEL_ENV

runner = CliRunner()


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[logging.Logger, None, None]:
    """
    Give configure_logging a clean root logger and restore the original afterwards.
    """
    root = logging.getLogger()
    original_level = root.level
    monkeypatch.setattr(base, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield root
    root.setLevel(original_level)


@pytest.mark.unit
def test_configure_logging_uses_given_level(fresh_logging: logging.Logger) -> None:
    base.configure_logging(logging.INFO)
    assert fresh_logging.level == logging.INFO


@pytest.mark.unit
def test_env_level_overrides_default(
    fresh_logging: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    base.configure_logging()
    assert fresh_logging.level == logging.DEBUG


@pytest.mark.unit
def test_unknown_env_level_falls_back_to_default(
    fresh_logging: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    base.configure_logging(logging.ERROR)
    assert fresh_logging.level == logging.ERROR


@pytest.mark.unit
def test_configure_logging_runs_once(fresh_logging: logging.Logger) -> None:
    base.configure_logging(logging.INFO)
    base.configure_logging(logging.CRITICAL)
    assert fresh_logging.level == logging.INFO
    assert len(fresh_logging.handlers) == 1


@pytest.mark.integration
def test_verbose_switches_root_to_debug(fresh_logging: logging.Logger) -> None:
    fresh_logging.setLevel(logging.WARNING)
    result = runner.invoke(app, ["--verbose", "today"])
    assert result.exit_code == 0
    assert fresh_logging.level == logging.DEBUG


@pytest.mark.integration
def test_without_verbose_level_is_unchanged(fresh_logging: logging.Logger) -> None:
    fresh_logging.setLevel(logging.WARNING)
    result = runner.invoke(app, ["today"])
    assert result.exit_code == 0
    assert fresh_logging.level == logging.WARNING
