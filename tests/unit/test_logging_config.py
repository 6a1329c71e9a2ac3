"""Tests for logging configuration."""

import json
import logging
from pathlib import Path

import pytest

from selector_builder.config import LoggingConfig
from selector_builder.utils.logging_config import (
    JSONFormatter,
    TextFormatter,
    get_logger,
    log_tool_completion,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers after setup_logging replaces them."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestFormatters:
    """Test log formatters."""

    def test_json_formatter_includes_extra(self):
        """Test extra fields end up in the JSON record."""
        record = logging.LogRecord(
            "selector_builder.tools", logging.INFO, __file__, 10, "done", None, None
        )
        record.tool_name = "build_selector"

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "done"
        assert entry["level"] == "INFO"
        assert entry["tool_name"] == "build_selector"
        assert "msg" not in entry

    def test_text_formatter(self):
        """Test the human-readable format."""
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        assert "x - WARNING - careful" in TextFormatter().format(record)


class TestSetupLogging:
    """Test logging setup."""

    def test_setup_console_only(self, restore_root_logger):
        """Test a console handler is installed at the configured level."""
        setup_logging(LoggingConfig(level="WARNING", format="text", file=None))

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, TextFormatter)

    def test_setup_with_file(self, restore_root_logger, temp_dir: Path):
        """Test a rotating file handler is added when a file is configured."""
        log_file = temp_dir / "logs" / "builder.log"

        setup_logging(LoggingConfig(level="INFO", format="json", file=str(log_file)))

        assert log_file.parent.exists()
        assert len(restore_root_logger.handlers) == 2
        assert all(
            isinstance(handler.formatter, JSONFormatter)
            for handler in restore_root_logger.handlers
        )


class TestLoggers:
    """Test logger helpers."""

    def test_get_logger_namespace(self):
        """Test loggers live under the package namespace."""
        assert get_logger("server").name == "selector_builder.server"

    def test_log_tool_completion_failure(self, caplog):
        """Test failed tool runs are logged as errors."""
        with caplog.at_level(logging.INFO, logger="selector_builder"):
            log_tool_completion("build_selector", False, 0.0123, "boom")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error == "boom"
        assert record.duration_ms == 12.3
