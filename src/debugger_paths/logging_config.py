"""Logging configuration for debugger-paths.

This module provides JSON-formatted logging to stderr (default) and optional
human-readable file logging for development.

IMPORTANT: No logging at import time. The host application sets logging up
explicitly via setup_logging().
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

# Extra fields lifted from log records into the JSON object
_EXTRA_FIELDS = ("file_uri", "local_path", "server_root", "client_root", "config_file")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as a JSON line.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log line
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def setup_logging(config: "Config") -> None:
    """
    Configure logging based on config.log_mode.

    Args:
        config: Configuration instance with logging settings

    Logging Modes:
        - "stderr": JSON formatter to stderr (default)
        - "file": Human-readable format to config.log_file
        - "both": Both outputs

    The root logger level is set from config.log_level, and so is the level
    of the debugger_paths logger.

    Raises:
        ValueError: If file logging is requested without config.log_file
    """
    if config.log_mode in ("file", "both") and config.log_file is None:
        raise ValueError(f"log_mode {config.log_mode!r} requires a log file")

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    json_formatter = JsonFormatter()
    human_formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.log_mode in ("stderr", "both"):
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(json_formatter)
        root_logger.addHandler(stderr_handler)

    if config.log_mode in ("file", "both") and config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setFormatter(human_formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("debugger_paths").setLevel(config.log_level)

    logging.info(
        "Logging initialized",
        extra={
            "log_mode": config.log_mode,
            "log_level": config.log_level,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the debugger_paths namespace.

    Args:
        name: Logger name (e.g., "mapping")

    Returns:
        Logger instance for "debugger_paths.<name>"

    Example:
        >>> get_logger("mapping").name
        'debugger_paths.mapping'
    """
    return logging.getLogger(f"debugger_paths.{name}")

