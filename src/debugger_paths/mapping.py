"""Translation of file locations between the editor and the debugger.

The debugger (server side) reports locations as file:// URIs, the editor
(client side) works with native paths. Both sides may see the same sources
under different roots and may run on different operating systems; a path
mapping of {server_prefix: client_prefix} relates the roots.

All functions are pure: no filesystem access, no working directory, no state.
"""

from collections.abc import Mapping
from urllib.parse import ParseResult, SplitResult, urljoin

from .logging_config import get_logger
from .utils.paths import (
    is_parent_relative,
    is_uri_drive_path,
    is_windows_path,
    join_relative,
    lowercase_drive_letter,
    normalize,
    relative_path,
    strip_uri_drive_slash,
)
from .utils.uri import decode_uri_path, ensure_trailing_slash, file_url, is_windows_uri, relative_url
from .validation import validate_file_uri, validate_local_path, validate_path_mapping

logger = get_logger("mapping")

# {server_prefix: client_prefix}, or (server_prefix, client_prefix) pairs
PathMapping = Mapping[str, str] | list[tuple[str, str]] | tuple[tuple[str, str], ...]


def _relative_or_none(from_path: str, to_path: str, *, windows: bool) -> str | None:
    """Relative path from from_path to to_path, or None if to_path is not below it."""
    try:
        relative = relative_path(from_path, to_path, windows=windows)
    except ValueError:
        # Different drives
        return None
    if is_parent_relative(relative):
        return None
    return relative


def convert_debugger_path_to_client(
    file_uri: str | ParseResult | SplitResult,
    path_mapping: PathMapping | None = None,
) -> str:
    """Convert a debugger file URI to a local path with respect to the mapping.

    Args:
        file_uri: file:// URI reported by the debugger, as a string or as
            the result of urlparse()/urlsplit()
        path_mapping: Ordered {server_prefix: client_prefix}; the first prefix
            containing the path wins

    Returns:
        Client path. Without a matching prefix this is the decoded URI path,
        normalized.

    Raises:
        ValidationError: If file_uri is not a file:// URI or the mapping is
            malformed

    Example:
        >>> convert_debugger_path_to_client(
        ...     "file:///var/www/src/a.php", {"/var/www": "/home/user/project"}
        ... )
        '/home/user/project/src/a.php'
    """
    parsed = validate_file_uri(file_uri)
    mapping = validate_path_mapping(path_mapping)

    server_path = decode_uri_path(parsed)
    # /C:/foo -> C:/foo
    server_is_windows = is_uri_drive_path(server_path)
    if server_is_windows:
        server_path = server_path[1:]

    for server_root, client_root in mapping:
        if server_is_windows:
            server_root = strip_uri_drive_slash(server_root)
        relative = _relative_or_none(server_root, server_path, windows=server_is_windows)
        if relative is None:
            continue
        local_path = join_relative(client_root, relative)
        logger.debug(
            f"Mapped {server_path} to {local_path}",
            extra={"server_root": server_root, "client_root": client_root},
        )
        return local_path

    return normalize(server_path)


def convert_client_path_to_debugger(
    local_path: str,
    path_mapping: PathMapping | None = None,
) -> str:
    """Convert a local path to a debugger file URI with respect to the mapping.

    Windows drive letters are lowercased since debuggers report them that way.

    Args:
        local_path: Absolute client path (POSIX or Windows form)
        path_mapping: Ordered {server_prefix: client_prefix}; the first client
            prefix containing the path wins

    Returns:
        file:// URI on the server side. Without a matching prefix this is
        the URI of local_path itself.

    Raises:
        ValidationError: If local_path is not absolute or the mapping is
            malformed

    Example:
        >>> convert_client_path_to_debugger(
        ...     "/home/user/project/src/a.php", {"/var/www": "/home/user/project"}
        ... )
        'file:///var/www/src/a.php'
    """
    validate_local_path(local_path)
    mapping = validate_path_mapping(path_mapping)

    local_file_uri = file_url(lowercase_drive_letter(local_path))
    local_is_windows = is_windows_path(local_path)

    for server_root, client_root in mapping:
        relative = _relative_or_none(client_root, local_path, windows=local_is_windows)
        if relative is None:
            continue

        # Rebuilt from the normalized root so both URIs share one spelling
        local_file_uri = file_url(lowercase_drive_letter(join_relative(client_root, relative)))
        client_root_url = ensure_trailing_slash(file_url(lowercase_drive_letter(normalize(client_root))))
        server_root_url = ensure_trailing_slash(file_url(lowercase_drive_letter(normalize(server_root))))
        if not relative:
            # The root itself; compare it as a directory too
            local_file_uri = ensure_trailing_slash(local_file_uri)

        url_relative_to_root = relative_url(client_root_url, local_file_uri)
        server_file_uri = urljoin(server_root_url, url_relative_to_root)
        logger.debug(
            f"Mapped {local_path} to {server_file_uri}",
            extra={"server_root": server_root, "client_root": client_root},
        )
        return server_file_uri

    return local_file_uri


def is_same_uri(client_uri: str, debugger_uri: str) -> bool:
    """Compare an editor URI with a debugger URI.

    Windows file URIs (file:///C:/...) are compared case-insensitively,
    everything else exactly.
    """
    if is_windows_uri(client_uri) or is_windows_uri(debugger_uri):
        return client_uri.lower() == debugger_uri.lower()
    return client_uri == debugger_uri
