"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from microcks_mcp.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("microcks_mcp").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("microcks_mcp").level == logging.WARNING

    def test_json_mode_output_goes_to_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("microcks_mcp.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        assert captured.out == ""
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "microcks_mcp.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("microcks_mcp.services.list_services").debug("Listing all services")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Listing all services"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "microcks_mcp.services.list_services"

    def test_http_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("httpx").debug("HTTP Request: GET")
        logging.getLogger("httpcore").debug("connect_tcp.started")

        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
