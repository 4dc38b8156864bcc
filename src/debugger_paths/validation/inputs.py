"""Input validation for debugger file URIs."""

from urllib.parse import ParseResult, SplitResult, urlparse

from .paths import ValidationError


def validate_file_uri(file_uri: str | ParseResult | SplitResult | None) -> ParseResult | SplitResult:
    """Validate a server-reported file URI.

    Args:
        file_uri: URI string or an already parsed URI

    Returns:
        Parsed URI

    Raises:
        ValidationError: If the URI is missing, empty or not a file:// URI
    """
    if file_uri is None:
        raise ValidationError("file_uri", "file_uri parameter is required")

    if isinstance(file_uri, str):
        if not file_uri.strip():
            raise ValidationError("file_uri", "file_uri parameter cannot be empty")
        parsed: ParseResult | SplitResult = urlparse(file_uri)
    elif isinstance(file_uri, (ParseResult, SplitResult)):
        parsed = file_uri
    else:
        raise ValidationError("file_uri", f"file_uri must be a string or parsed URI, got {type(file_uri).__name__}")

    if parsed.scheme != "file":
        raise ValidationError("file_uri", f"Expected file:// URI, got: {parsed.geturl()}")

    return parsed
