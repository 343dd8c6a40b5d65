"""Shared test fixtures for calvin tests.

This module provides common fixtures used across all test modules:
- A pinned "today" and a matching now provider
- Config directory isolation
- Root logger restoration after setup_logging()

Usage:
    def test_something(now_provider):
        result = resolve(["alice", "tomorrow"], now_provider)
        ...
"""

import logging
from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def fixed_today() -> date:
    """A Friday: 2025-01-31."""
    return date(2025, 1, 31)


@pytest.fixture
def now_provider(fixed_today: date) -> Callable[[], date]:
    """Now provider pinned to fixed_today."""
    return lambda: fixed_today


# ─────────────────────────────────────────────────────────────────────────────
# Config Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def calvin_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty config directory that calvin.config_dir() points at.

    Returns:
        Path to the temporary ~/.calvin replacement
    """
    directory = tmp_path / ".calvin"
    directory.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("CALVIN_CONFIG_DIR", str(directory))
    return directory


# ─────────────────────────────────────────────────────────────────────────────
# Logging Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Undo setup_logging() changes to the root logger after the test.

    Yields:
        The root logger
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
