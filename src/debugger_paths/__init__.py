"""Translate file locations between an editor and a remote debugger."""

from .context import discover_path_mapping, find_config_file, load_path_mapping
from .mapping import (
    PathMapping,
    convert_client_path_to_debugger,
    convert_debugger_path_to_client,
    is_same_uri,
)
from .validation import ValidationError

__all__ = [
    "PathMapping",
    "ValidationError",
    "convert_client_path_to_debugger",
    "convert_debugger_path_to_client",
    "discover_path_mapping",
    "find_config_file",
    "is_same_uri",
    "load_path_mapping",
]
