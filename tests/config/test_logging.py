"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from mercyctl.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    mercy = logging.getLogger("mercyctl")
    mercy_level = mercy.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    mercy.setLevel(mercy_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("mercyctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("mercyctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("mercyctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "mercyctl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("mercyctl.plugins.manager").debug("Registered plugin: probe")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Registered plugin: probe"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "mercyctl.plugins.manager"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("mercyctl.test").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("urllib3").debug("connection pool noise")
        logging.getLogger("pluggy").debug("hook noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True)
        assert len(logging.getLogger().handlers) == 1
