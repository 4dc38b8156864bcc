"""Path-mapping discovery from configuration files."""

from .mapping_file import (
    discover_path_mapping,
    find_config_file,
    load_path_mapping,
)

__all__ = [
    "discover_path_mapping",
    "find_config_file",
    "load_path_mapping",
]
