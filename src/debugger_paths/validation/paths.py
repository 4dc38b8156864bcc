"""Precondition checks for paths and path-mapping tables."""

from collections.abc import Mapping

from ..utils.paths import is_absolute


class ValidationError(ValueError):
    """Raised when a caller passes input outside the mapping contract."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize validation error.

        Args:
            field: The argument that failed validation
            message: Description of what went wrong
        """
        super().__init__(message)
        self.field = field
        self.message = message


def validate_local_path(local_path: str) -> str:
    """Check that a client path is a non-empty absolute path.

    Both POSIX (``/home/me/a.php``) and Windows (``C:\\site\\a.php``) forms
    are accepted regardless of the host platform.

    Args:
        local_path: Client-side file path

    Returns:
        The path, unchanged

    Raises:
        ValidationError: If the path is not a string, empty or relative
    """
    if not isinstance(local_path, str):
        raise ValidationError("local_path", f"local_path must be a string, got {type(local_path).__name__}")
    if not local_path.strip():
        raise ValidationError("local_path", "local_path cannot be empty")
    if not is_absolute(local_path):
        raise ValidationError("local_path", f"local_path must be absolute, got: {local_path}")
    return local_path


def validate_path_mapping(
    path_mapping: Mapping[str, str] | list[tuple[str, str]] | tuple[tuple[str, str], ...] | None,
) -> list[tuple[str, str]]:
    """Check a path mapping and return it as an ordered list of pairs.

    Args:
        path_mapping: {server_prefix: client_prefix} mapping, a sequence of
            (server_prefix, client_prefix) pairs, or None

    Returns:
        List of (server_prefix, client_prefix) in the caller's order; empty
        for None

    Raises:
        ValidationError: If an entry is not a pair of absolute path strings
    """
    if path_mapping is None:
        return []

    if isinstance(path_mapping, Mapping):
        pairs = list(path_mapping.items())
    elif isinstance(path_mapping, (list, tuple)):
        pairs = list(path_mapping)
    else:
        raise ValidationError(
            "path_mapping",
            f"path_mapping must be a mapping or a list of pairs, got {type(path_mapping).__name__}",
        )

    result = []
    for entry in pairs:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValidationError("path_mapping", f"Expected (server, client) pair, got: {entry!r}")
        server_prefix, client_prefix = entry
        if not isinstance(server_prefix, str) or not isinstance(client_prefix, str):
            raise ValidationError("path_mapping", f"Path prefixes must be strings, got: {entry!r}")
        if not is_absolute(server_prefix):
            raise ValidationError("path_mapping", f"Server path must be absolute, got: {server_prefix!r}")
        if not is_absolute(client_prefix):
            raise ValidationError("path_mapping", f"Local path must be absolute, got: {client_prefix!r}")
        result.append((server_prefix, client_prefix))

    return result
