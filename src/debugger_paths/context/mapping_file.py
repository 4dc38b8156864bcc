"""Path-mapping tables from configuration files.

A mapping table comes from either:
- debugger-paths.json: {"pathMappings": {"/var/www": "/home/me/site"}}
- pyproject.toml: a [tool.debugger-paths.path-mappings] table

Entry order in the file is preserved, so the first matching server prefix in
the file is the one used for a conversion.
"""

import json
from pathlib import Path

from ..config import get_config
from ..logging_config import get_logger
from ..validation import ValidationError, validate_path_mapping

logger = get_logger("context.mapping_file")

JSON_CONFIG_NAME = "debugger-paths.json"
PYPROJECT_NAME = "pyproject.toml"
TOOL_TABLE = "debugger-paths"


def _load_toml(content: str) -> dict:
    """Parse TOML with tomllib (Python 3.11+) or tomli."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[import-not-found,no-redef]

    return tomllib.loads(content)


def find_config_file(directory: Path) -> Path | None:
    """
    Find a path-mapping file by walking up the directory tree.

    Searches for (in priority order):
    1. debugger-paths.json
    2. pyproject.toml with a [tool.debugger-paths] table

    Args:
        directory: Directory to start search from

    Returns:
        Path to config file if found, None otherwise
    """
    current = directory.resolve()

    while True:
        json_config = current / JSON_CONFIG_NAME
        if json_config.is_file():
            logger.debug(f"Found {JSON_CONFIG_NAME} at: {json_config}")
            return json_config

        pyproject = current / PYPROJECT_NAME
        if pyproject.is_file():
            try:
                data = _load_toml(pyproject.read_text(encoding="utf-8"))
                tool = data.get("tool")
                if isinstance(tool, dict) and isinstance(tool.get(TOOL_TABLE), dict):
                    logger.debug(f"Found pyproject.toml with [tool.{TOOL_TABLE}] at: {pyproject}")
                    return pyproject
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to read {pyproject}: {e}")
            except ValueError as e:
                # tomllib.TOMLDecodeError subclasses ValueError
                logger.warning(f"Failed to parse {pyproject}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    logger.debug("No path-mapping file found")
    return None


def load_path_mapping(config_file: Path) -> list[tuple[str, str]]:
    """
    Load the path mapping from a JSON or pyproject.toml file.

    Args:
        config_file: Path to debugger-paths.json (or any .json file) or a
            .toml file with a [tool.debugger-paths] table

    Returns:
        (server_prefix, client_prefix) pairs in file order; empty if the
        file defines no mapping

    Raises:
        OSError: If the file cannot be read
        ValidationError: If the file cannot be parsed or the mapping is
            malformed
    """
    content = config_file.read_text(encoding="utf-8")

    if config_file.suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValidationError("config_file", f"Invalid JSON in {config_file}: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError("config_file", f"Expected a JSON object in {config_file}")
        raw_mapping = data.get("pathMappings", {})
    else:
        try:
            data = _load_toml(content)
        except ValueError as e:
            raise ValidationError("config_file", f"Invalid TOML in {config_file}: {e}") from e
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ValidationError("config_file", f"[tool] in {config_file} must be a table")
        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ValidationError("config_file", f"[tool.{TOOL_TABLE}] in {config_file} must be a table")
        raw_mapping = table.get("path-mappings", {})

    if not isinstance(raw_mapping, dict):
        raise ValidationError("config_file", f"Path mappings in {config_file} must be a table/object")

    mapping = validate_path_mapping(raw_mapping)
    logger.info(
        f"Loaded {len(mapping)} path mapping(s) from {config_file}",
        extra={"config_file": str(config_file)},
    )
    return mapping


def discover_path_mapping(start: Path) -> list[tuple[str, str]] | None:
    """
    Find and load the path mapping that applies to start.

    DEBUGGER_PATHS_MAPPING_FILE takes precedence over searching upwards from
    start.

    Args:
        start: File or directory to search from

    Returns:
        Mapping pairs, or None if no mapping file was found
    """
    config = get_config()
    if config.mapping_file is not None:
        logger.debug(f"Using mapping file from environment: {config.mapping_file}")
        return load_path_mapping(config.mapping_file)

    start = start.resolve()
    directory = start if start.is_dir() else start.parent
    config_file = find_config_file(directory)
    if config_file is None:
        return None
    return load_path_mapping(config_file)
