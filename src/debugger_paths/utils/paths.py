"""OS-aware path algebra on plain strings.

The client and the debugged server may run on different operating systems,
so the path rules are picked per path string (by sniffing for a drive letter)
rather than from the host platform. Nothing here touches the filesystem or
the working directory.
"""

import ntpath
import posixpath
import re
from types import ModuleType

# C:\ or C:/
_WINDOWS_PATH_RE = re.compile(r"^[a-zA-Z]:[\\/]")
# /C:/ as found in the path component of a file URI
_URI_DRIVE_PATH_RE = re.compile(r"^/[a-zA-Z]:/")
# Drive prefix with an optional leading slash, either separator
_DRIVE_PREFIX_RE = re.compile(r"^/?[a-zA-Z]:[\\/]")


def is_windows_path(path: str) -> bool:
    """Return True if path is a Windows absolute path (drive letter or UNC)."""
    return bool(_WINDOWS_PATH_RE.match(path)) or path.startswith("\\\\")


def is_uri_drive_path(path: str) -> bool:
    """Return True if a decoded URI path encodes a Windows drive (``/C:/...``)."""
    return bool(_URI_DRIVE_PATH_RE.match(path))


def strip_uri_drive_slash(path: str) -> str:
    """Turn ``/C:/foo`` into ``C:/foo``; other paths are returned unchanged."""
    if is_uri_drive_path(path):
        return path[1:]
    return path


def lowercase_drive_letter(path: str) -> str:
    """Lowercase a leading drive letter (``C:\\``, ``C:/`` or ``/C:/``).

    Debuggers report Windows drive letters in lowercase in their file URIs.
    """
    return _DRIVE_PREFIX_RE.sub(lambda match: match.group(0).lower(), path, count=1)


def is_absolute(path: str) -> bool:
    """Return True if path is absolute in either POSIX or Windows form."""
    return path.startswith("/") or is_windows_path(path)


def flavor_for(windows: bool) -> ModuleType:
    """Return the path module (ntpath or posixpath) for the given flavor."""
    return ntpath if windows else posixpath


def relative_path(from_path: str, to_path: str, *, windows: bool) -> str:
    """Compute the relative path from from_path to to_path.

    Works like os.path.relpath for absolute inputs of the chosen flavor, but
    on strings only: the working directory is never consulted. Windows rules
    compare segments case-insensitively and accept both separators.

    Args:
        from_path: Absolute start path
        to_path: Absolute target path
        windows: Use Windows rules instead of POSIX rules

    Returns:
        Relative path using the flavor's separator; empty string when both
        paths are the same

    Raises:
        ValueError: If the paths are on different Windows drives
    """
    flavor = flavor_for(windows)
    start_drive, start_rest = flavor.splitdrive(flavor.normpath(from_path))
    target_drive, target_rest = flavor.splitdrive(flavor.normpath(to_path))

    if windows and start_drive.lower() != target_drive.lower():
        raise ValueError(f"path is on drive {target_drive!r}, start on drive {start_drive!r}")

    start_parts = [part for part in start_rest.split(flavor.sep) if part]
    target_parts = [part for part in target_rest.split(flavor.sep) if part]

    common = 0
    for start_part, target_part in zip(start_parts, target_parts):
        if windows:
            same = start_part.lower() == target_part.lower()
        else:
            same = start_part == target_part
        if not same:
            break
        common += 1

    parts = [flavor.pardir] * (len(start_parts) - common) + target_parts[common:]
    return flavor.sep.join(parts)


def is_parent_relative(relative: str) -> bool:
    """Return True if a relative path climbs above its start (begins with ``..``)."""
    first = re.split(r"[\\/]", relative, maxsplit=1)[0]
    return first == ".."


def join_relative(root: str, relative: str) -> str:
    """Join a relative path of either flavor onto root and normalize it.

    The flavor of root decides the separators of the result, so a relative
    path computed with Windows rules can be put under a POSIX root and the
    other way round.
    """
    flavor = flavor_for(is_windows_path(root))
    segments = [segment for segment in re.split(r"[\\/]", relative) if segment]
    return flavor.normpath(flavor.join(root, *segments))


def normalize(path: str) -> str:
    """Collapse ``.``/``..`` segments and separators using the path's own flavor."""
    return flavor_for(is_windows_path(path)).normpath(path)
