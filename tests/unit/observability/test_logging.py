"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from mp_exports.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("mp_exports.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_initial_values_bound(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("x", job_id=3).info("export.poll")
        assert logs == [{"job_id": 3, "event": "export.poll", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configure_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("mp_exports.json").info("export.ready", job_id=7)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "export.ready"
        assert payload["job_id"] == 7
        assert payload["level"] == "info"

    def test_sensitive_fields_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(sensitive_fields=frozenset({"Authorization"}))
        structlog.get_logger("mp_exports.json").info(
            "export.submitted", authorization="Bearer x", context={"authorization": "y", "q": 1}
        )
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["authorization"] == "***"
        assert payload["context"] == {"authorization": "***", "q": 1}
