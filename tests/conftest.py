"""Pytest configuration and shared fixtures for vouch tests."""

import logging

import pytest
import structlog
from vouch._config import reset
from vouch._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Start every test unconfigured and undo any logging setup afterwards."""
    monkeypatch.delenv('VOUCH_LOG_LEVEL', raising=False)
    monkeypatch.delenv('VOUCH_LOG_JSON', raising=False)
    root_logger = logging.getLogger()
    level = root_logger.level
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()
    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def nix():
    """Action that does nothing."""

    def action() -> None:
        pass

    return action


@pytest.fixture
def something():
    """Value producer returning a fixed string."""
    return lambda: 'enigma'
