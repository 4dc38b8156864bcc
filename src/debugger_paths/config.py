"""Runtime configuration management.

Environment Variables:
    DEBUGGER_PATHS_LOG_LEVEL: Logging level (default: INFO)
    DEBUGGER_PATHS_LOG_MODE: Logging mode: stderr, file, both (default: stderr)
    DEBUGGER_PATHS_LOG_FILE: Log file path (required for file/both modes)
    DEBUGGER_PATHS_MAPPING_FILE: Path-mapping file to use instead of searching
        for one (optional)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast


@dataclass
class Config:
    """Runtime configuration for debugger-paths."""

    log_level: str  # Logging level: DEBUG, INFO, WARNING, ERROR
    log_mode: Literal["stderr", "file", "both"]  # Logging mode
    log_file: Path | None  # Log file path (for file/both modes)
    mapping_file: Path | None  # Explicit path-mapping file


_config: Config | None = None


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Returns:
        Config instance with validated values

    Raises:
        ValueError: If configuration values are invalid
    """
    log_level = os.getenv("DEBUGGER_PATHS_LOG_LEVEL", "INFO").upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        raise ValueError(
            f"DEBUGGER_PATHS_LOG_LEVEL must be one of {valid_levels}, got: {log_level}"
        )

    log_mode_str = os.getenv("DEBUGGER_PATHS_LOG_MODE", "stderr").lower()
    valid_modes = {"stderr", "file", "both"}
    if log_mode_str not in valid_modes:
        raise ValueError(
            f"DEBUGGER_PATHS_LOG_MODE must be one of {valid_modes}, got: {log_mode_str}"
        )
    # Validated above
    log_mode = cast(Literal["stderr", "file", "both"], log_mode_str)

    log_file = None
    if log_file_str := os.getenv("DEBUGGER_PATHS_LOG_FILE"):
        log_file = Path(log_file_str).resolve()
    elif log_mode != "stderr":
        raise ValueError(
            f"DEBUGGER_PATHS_LOG_FILE is required when DEBUGGER_PATHS_LOG_MODE is {log_mode}"
        )

    mapping_file = None
    if mapping_file_str := os.getenv("DEBUGGER_PATHS_MAPPING_FILE"):
        mapping_file = Path(mapping_file_str).resolve()
        if mapping_file.suffix not in (".json", ".toml"):
            raise ValueError(
                "DEBUGGER_PATHS_MAPPING_FILE must be a .json or .toml file, "
                f"got: {mapping_file_str}"
            )

    return Config(
        log_level=log_level,
        log_mode=log_mode,
        log_file=log_file,
        mapping_file=mapping_file,
    )


def get_config() -> Config:
    """
    Get singleton config instance.

    Returns:
        Config instance (loads on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Reset cached config (for testing only).

    Forces load_config() to run again on the next get_config() call.
    """
    global _config
    _config = None
