"""Content negotiation headers for a single operation."""

from collections.abc import Iterable

JSON_MIME = "application/json"
MULTIPART_MIME = "multipart/form-data"


def is_json_mime(mime: str | None) -> bool:
    """Return True for ``application/json`` and ``application/*+json`` types."""
    if not mime:
        return False
    base = mime.split(";", 1)[0].strip().lower()
    return base == JSON_MIME or (base.startswith("application/") and base.endswith("+json"))


def select_accept(accept: Iterable[str], requested: str | None = None) -> str | None:
    """Pick the ``Accept`` value from an operation's acceptable types.

    The requested type wins when the operation accepts it. Otherwise the
    first declared type is used.
    """
    accept = [mime for mime in accept if mime]
    if not accept:
        return None
    if requested and requested in accept:
        return requested
    return accept[0]


def select_headers(accept: Iterable[str], content_type: str | None, is_multipart: bool = False) -> dict[str, str]:
    """Return ``Accept`` / ``Content-Type`` headers for a request.

    Args:
        accept: Acceptable response types declared by the operation
        content_type: Content type requested by the caller
        is_multipart: Whether the body is sent as multipart form data

    Returns:
        Header mapping, without entries that cannot be determined
    """
    headers: dict[str, str] = {}

    accept_value = select_accept(accept, content_type)
    if accept_value is not None:
        headers["Accept"] = accept_value

    if is_multipart:
        headers["Content-Type"] = MULTIPART_MIME
    elif content_type:
        headers["Content-Type"] = content_type

    return headers
