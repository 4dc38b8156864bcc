"""Unit tests for logging configuration.

These tests verify JSON formatting and logging setup.
"""

import json
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from debugger_paths.config import Config
from debugger_paths.logging_config import JsonFormatter, get_logger, setup_logging
from debugger_paths.mapping import convert_debugger_path_to_client


@pytest.fixture(autouse=True)
def clean_logger_state():
    """Ensure clean logger state before and after each test."""
    root = logging.getLogger()
    package_logger = logging.getLogger("debugger_paths")

    original_root_handlers = root.handlers[:]
    original_root_level = root.level
    original_package_handlers = package_logger.handlers[:]
    original_package_level = package_logger.level

    yield

    for handler in root.handlers:
        if handler not in original_root_handlers:
            handler.close()
    root.handlers = original_root_handlers
    root.setLevel(original_root_level)
    package_logger.handlers = original_package_handlers
    package_logger.setLevel(original_package_level)


def _make_config(**overrides) -> Config:
    values = {
        "log_level": "INFO",
        "log_mode": "stderr",
        "log_file": None,
        "mapping_file": None,
    }
    values.update(overrides)
    return Config(**values)


def _make_record(msg: str = "Test message", **kwargs) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=kwargs.get("exc_info"),
    )


class TestJsonFormatter:
    """Tests for JsonFormatter class."""

    def test_json_formatter_basic(self):
        """Test JsonFormatter outputs valid JSON with basic fields."""
        output = JsonFormatter().format(_make_record())
        log_obj = json.loads(output)

        assert set(log_obj) == {"timestamp", "level", "logger", "message"}
        assert log_obj["level"] == "INFO"
        assert log_obj["logger"] == "test.logger"
        assert log_obj["message"] == "Test message"
        datetime.fromisoformat(log_obj["timestamp"])

    def test_json_formatter_with_extra_fields(self):
        """Test JsonFormatter includes mapping extras."""
        record = _make_record()
        record.file_uri = "file:///var/www/a.php"
        record.local_path = "/home/me/a.php"
        record.server_root = "/var/www"
        record.client_root = "/home/me"
        record.config_file = "/home/me/debugger-paths.json"

        log_obj = json.loads(JsonFormatter().format(record))

        assert log_obj["file_uri"] == "file:///var/www/a.php"
        assert log_obj["local_path"] == "/home/me/a.php"
        assert log_obj["server_root"] == "/var/www"
        assert log_obj["client_root"] == "/home/me"
        assert log_obj["config_file"] == "/home/me/debugger-paths.json"

    def test_json_formatter_ignores_unknown_extras(self):
        """Test arbitrary record attributes are not serialized."""
        record = _make_record()
        record.something_else = "x"
        assert "something_else" not in json.loads(JsonFormatter().format(record))

    def test_json_formatter_with_exception(self):
        """Test JsonFormatter formats exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        log_obj = json.loads(JsonFormatter().format(_make_record(exc_info=exc_info)))

        assert "ValueError: Test error" in log_obj["exception"]
        assert "Traceback" in log_obj["exception"]

    def test_json_formatter_with_non_ascii(self):
        """Test JsonFormatter handles non-ASCII characters in messages."""
        log_obj = json.loads(JsonFormatter().format(_make_record("Pfad /tmp/ü.php")))
        assert log_obj["message"] == "Pfad /tmp/ü.php"


class TestGetLogger:
    """Tests for get_logger() function."""

    def test_get_logger_namespace(self):
        assert get_logger("mapping").name == "debugger_paths.mapping"

    def test_get_logger_different_names(self):
        logger1 = get_logger("module1")
        logger2 = get_logger("module2")
        assert logger1 is not logger2


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_setup_logging_stderr_mode(self):
        """Test setup_logging() adds a JSON stderr handler in stderr mode."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        setup_logging(_make_config())

        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream == sys.stderr
        assert isinstance(handler.formatter, JsonFormatter)

    def test_setup_logging_file_mode(self, tmp_path: Path):
        """Test setup_logging() adds a rotating file handler in file mode."""
        log_file = tmp_path / "logs" / "test.log"
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        setup_logging(_make_config(log_level="DEBUG", log_mode="file", log_file=log_file))

        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RotatingFileHandler)
        assert log_file.exists()

    def test_setup_logging_both_mode(self, tmp_path: Path):
        """Test setup_logging() adds both handlers in both mode."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()

        setup_logging(_make_config(log_mode="both", log_file=tmp_path / "test.log"))

        handler_types = sorted(type(h).__name__ for h in root_logger.handlers)
        assert handler_types == ["RotatingFileHandler", "StreamHandler"]

    def test_setup_logging_file_mode_without_log_file_raises_error(self):
        """Test file logging without a log file is rejected before any change."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        dummy_handler = logging.StreamHandler()
        root_logger.addHandler(dummy_handler)

        with pytest.raises(ValueError, match="requires a log file"):
            setup_logging(_make_config(log_mode="file"))

        assert root_logger.handlers == [dummy_handler]

    def test_setup_logging_clears_existing_handlers(self):
        """Test setup_logging() clears existing handlers to avoid duplicates."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        dummy_handler = logging.StreamHandler()
        root_logger.addHandler(dummy_handler)

        setup_logging(_make_config())

        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0] is not dummy_handler

    def test_setup_logging_sets_log_level(self):
        """Test setup_logging() sets the root and package levels."""
        logging.getLogger().handlers.clear()

        setup_logging(_make_config(log_level="DEBUG"))

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("debugger_paths").level == logging.DEBUG


class TestMappingLogs:
    """Tests for log records emitted by the mapper."""

    def test_matched_root_is_logged(self, caplog):
        """Test a mapped conversion logs the roots at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="debugger_paths.mapping"):
            convert_debugger_path_to_client("file:///var/www/a.php", {"/var/www": "/home/me"})

        records = [r for r in caplog.records if r.name == "debugger_paths.mapping"]
        assert len(records) == 1
        assert records[0].server_root == "/var/www"
        assert records[0].client_root == "/home/me"

    def test_unmapped_conversion_is_silent(self, caplog):
        """Test nothing is logged when no root matches."""
        with caplog.at_level(logging.DEBUG, logger="debugger_paths.mapping"):
            convert_debugger_path_to_client("file:///srv/a.php", {"/var/www": "/home/me"})

        assert not [r for r in caplog.records if r.name == "debugger_paths.mapping"]
