"""Utility modules for debugger-paths."""

from .paths import is_windows_path, lowercase_drive_letter, relative_path
from .uri import RELATIVE_URL_OPTIONS, file_url, is_windows_uri, relative_url

__all__ = [
    "RELATIVE_URL_OPTIONS",
    "file_url",
    "is_windows_path",
    "is_windows_uri",
    "lowercase_drive_letter",
    "relative_path",
    "relative_url",
]
