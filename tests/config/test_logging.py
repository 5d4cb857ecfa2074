"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from evry.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("evry").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("evry").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("evry.test")
        log.warning("json test", tag="backup")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["tag"] == "backup"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "evry.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("evry.infrastructure.tags").debug("Wrote tag %s", "backup")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Wrote tag backup"
        assert parsed["level"] == "debug"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("evry.services.schedule").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=False)
        configure_logging(verbose=False)
        assert len(logging.getLogger().handlers) == 1
