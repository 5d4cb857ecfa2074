"""Shared pytest fixtures for evry tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from evry.infrastructure.tags import TagStore

_EVRY_ENV_VARS = (
    "EVRY_DIR",
    "EVRY_DEBUG",
    "EVRY_JSON",
    "EVRY_PARSE_ERROR_LOG",
    "EVRY_VERBOSE",
    "EVRY_LOG_JSON",
    "EVRY_APP_NAME",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own EVRY_* settings out of the tests."""
    for name in _EVRY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    evry = logging.getLogger("evry")
    evry_level = evry.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    evry.setLevel(evry_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def evry_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point EVRY_DIR at a temporary data root."""
    root = tmp_path / "evry"
    monkeypatch.setenv("EVRY_DIR", str(root))
    return root


@pytest.fixture
def store(tmp_path: Path) -> TagStore:
    """TagStore rooted in a temporary directory."""
    return TagStore(tmp_path / "evry")
