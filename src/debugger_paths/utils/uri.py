"""File URI construction and relativization.

Handles conversion between path strings and file:// URIs without resolving
anything against the working directory, and computes relative references
between URIs (the inverse of urljoin).
"""

import re
from dataclasses import dataclass
from urllib.parse import ParseResult, SplitResult, quote, unquote, urlparse, urlsplit

# Characters JavaScript's encodeURI leaves alone, minus "?" and "#" which
# would start a query or fragment inside a path
_FILE_URL_SAFE = "/:@&=+$,;!*'()"

_WINDOWS_URI_RE = re.compile(r"^file:///[a-zA-Z]:/")

_DEFAULT_PORTS = {"http": 80, "https": 443, "ftp": 21, "ws": 80, "wss": 443}


@dataclass(frozen=True)
class RelativeUrlOptions:
    """Behaviour switches of relative_url()."""

    # Never emit a root-relative ("/...") reference, even when shorter
    path_relative_only: bool = True
    # A trailing slash on the base is part of the directory, never trimmed
    remove_root_trailing_slash: bool = False
    # Ports are compared verbatim; ":80" and ":443" are never dropped
    strip_default_ports: bool = False


RELATIVE_URL_OPTIONS = RelativeUrlOptions()


def _authority(parts: SplitResult, options: RelativeUrlOptions) -> str:
    """Authority of a URL as compared by relative_url()."""
    default_port = _DEFAULT_PORTS.get(parts.scheme)
    if options.strip_default_ports and default_port is not None and parts.port == default_port:
        return parts.netloc.rsplit(":", 1)[0]
    return parts.netloc


def file_url(path: str) -> str:
    """Convert a path string to a file:// URI without resolving it.

    The path is taken as already absolute:
    - POSIX: /path/to/file -> file:///path/to/file
    - Windows: c:\\path\\to\\file -> file:///c:/path/to/file

    Args:
        path: Absolute POSIX or Windows path

    Returns:
        file:// URI string with proper URL encoding

    Example:
        >>> file_url("/var/www/my file.php")
        'file:///var/www/my%20file.php'
    """
    path_name = path.replace("\\", "/")
    # Windows drive letter must be prefixed with a slash
    if not path_name.startswith("/"):
        path_name = "/" + path_name
    return "file://" + quote(path_name, safe=_FILE_URL_SAFE)


def decode_uri_path(file_uri: str | ParseResult | SplitResult) -> str:
    """Return the percent-decoded path component of a URI.

    Args:
        file_uri: URI string or a result of urlparse()/urlsplit()

    Returns:
        Decoded path, e.g. "/C:/my dir/file.php"
    """
    if isinstance(file_uri, str):
        file_uri = urlparse(file_uri)
    return unquote(file_uri.path)


def ensure_trailing_slash(url: str) -> str:
    """Append "/" to url unless it already ends with one."""
    if not url.endswith("/"):
        url += "/"
    return url


def is_windows_uri(uri: str) -> bool:
    """Return True for file URIs carrying a Windows drive (file:///C:/...)."""
    return bool(_WINDOWS_URI_RE.match(uri))


def _split_url_path(path: str) -> tuple[list[str], str]:
    """Split a URL path into directory segments and the last segment.

    Empty and "." segments are dropped and ".." removes its parent, the way
    urljoin() resolves a path.
    """
    segments = path.split("/")
    last = segments.pop()
    if last in (".", ".."):
        segments.append(last)
        last = ""

    dirs: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if dirs:
                dirs.pop()
            continue
        dirs.append(segment)
    return dirs, last


def relative_url(from_url: str, to_url: str) -> str:
    """Like os.path.relpath() but for absolute URLs.

    Inverse of urljoin(): urljoin(from_url, relative_url(from_url, to_url))
    gives back to_url. The reference is always path-relative, the trailing
    slash of from_url marks it as a directory, and ports are compared as
    written (see RELATIVE_URL_OPTIONS).

    Args:
        from_url: Absolute base URL
        to_url: Absolute target URL

    Returns:
        Relative reference, or to_url itself when scheme or authority differ

    Example:
        >>> relative_url("file:///var/www/", "file:///var/www/src/a.php")
        'src/a.php'
        >>> relative_url("file:///var/www/", "file:///var/lib/x")
        '../lib/x'
    """
    options = RELATIVE_URL_OPTIONS
    base = urlsplit(from_url)
    target = urlsplit(to_url)

    if base.scheme != target.scheme or _authority(base, options) != _authority(target, options):
        return to_url

    base_dirs, _ = _split_url_path(base.path)
    target_dirs, target_file = _split_url_path(target.path)

    common = 0
    for base_dir, target_dir in zip(base_dirs, target_dirs):
        if base_dir != target_dir:
            break
        common += 1

    parts = [".."] * (len(base_dirs) - common) + target_dirs[common:] + [target_file]
    relative = "/".join(parts)

    # "c:/foo" would be read as a URI with scheme "c"
    if ":" in next((part for part in parts if part), ""):
        relative = "./" + relative

    if not options.path_relative_only and len(target.path) < len(relative):
        relative = target.path

    if target.query:
        relative += "?" + target.query
    elif not relative and base.query:
        # An empty reference would inherit the base query
        relative = "./"
    if target.fragment:
        relative += "#" + target.fragment
    return relative
