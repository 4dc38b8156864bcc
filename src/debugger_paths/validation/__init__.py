"""Input validation utilities."""

from .inputs import validate_file_uri
from .paths import ValidationError, validate_local_path, validate_path_mapping

__all__ = [
    "ValidationError",
    "validate_file_uri",
    "validate_local_path",
    "validate_path_mapping",
]
