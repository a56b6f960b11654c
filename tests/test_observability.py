"""
Tests for logging configuration and request logging middleware.

Dependencies: pytest, fastapi.testclient, mermaid_validation.observability
System role: Log format and structured request record validation
"""

import logging

import pytest

from mermaid_validation.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)
from mermaid_validation.observability.logger import configure_logging


@pytest.fixture
def restore_root_logger():
    """Put back the root logger's handlers and level after configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_format_includes_correlation_id(self, capsys, restore_root_logger):
        configure_logging("INFO")
        set_correlation_id("cid-123")
        try:
            logging.getLogger("mermaid_validation.sample").info("rendered")
        finally:
            clear_correlation_id()

        out = capsys.readouterr().out
        assert " - mermaid_validation.sample - INFO - [cid-123] rendered" in out

    def test_outside_request_uses_placeholder(self, capsys, restore_root_logger):
        configure_logging("INFO")

        logging.getLogger("mermaid_validation.sample").info("startup")

        assert "[-] startup" in capsys.readouterr().out

    def test_level_applied(self, capsys, restore_root_logger):
        configure_logging("warning")

        logging.getLogger("mermaid_validation.sample").info("hidden")

        assert logging.getLogger().level == logging.WARNING
        assert "hidden" not in capsys.readouterr().out


class TestRequestLoggingMiddleware:
    """Test suite for RequestLoggingMiddleware records."""

    def test_request_record_carries_process_time_ms(self, client, caplog):
        caplog.set_level(logging.INFO, logger="mermaid_validation.observability.middleware")

        response = client.get("/health")

        assert response.status_code == 200
        records = [
            r for r in caplog.records
            if r.name == "mermaid_validation.observability.middleware"
        ]
        assert len(records) == 1
        record = records[0]
        assert record.getMessage() == "GET /health - 200"
        assert record.method == "GET"
        assert record.path == "/health"
        assert record.status_code == 200
        assert isinstance(record.process_time_ms, float)
        assert record.process_time_ms >= 0
