"""Error handling utilities for HTTP responses."""

import logging
from typing import Any

import httpx

from labrinth_client import serializer
from labrinth_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    GoneError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    410: GoneError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[APIError]:
    """Return the APIError subclass used for a status code."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def _request_url(response: httpx.Response) -> str | None:
    # Responses built by hand (tests, mocks) may have no request attached
    try:
        return str(response.request.url)
    except RuntimeError:
        return None


def decode_error_payload(response: httpx.Response, error_model: Any) -> Any:
    """Decode an error body into its declared model, best effort.

    Returns None when no model is declared or the body does not match it. The
    raw body stays available on the raised exception either way.
    """
    if error_model is None:
        return None
    try:
        if error_model is str:
            return response.text
        return serializer.deserialize(response.json(), error_model)
    except (ValueError, TypeError) as e:
        logger.debug(f"Could not decode {response.status_code} error body as {error_model!r}: {e}")
        return None


def raise_for_status(response: httpx.Response, error_model: Any = None) -> None:
    """Raise the matching APIError subclass for a non-2xx response.

    Args:
        response: HTTP response object
        error_model: Declared model for this status' error body (e.g. AuthError
            for 401), decoded best effort and attached as ``error_payload``

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    exc_class = exception_class_for(status_code)
    error_payload = decode_error_payload(response, error_model)

    # Build error message
    if hasattr(error_payload, "to_exception_message"):
        message = f"[{status_code}] {error_payload.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"[{status_code}] Error connecting to the API"
        url = _request_url(response)
        if url:
            message += f" ({url})"
        if response_text:
            message += f": {response_text}"

    kwargs = {
        "status_code": status_code,
        "headers": response.headers,
        "body": response.text,
        "response": response,
        "error_payload": error_payload,
    }

    if exc_class is RateLimitError:
        reset_after = None
        if "x-ratelimit-reset" in response.headers:
            try:
                reset_after = int(response.headers["x-ratelimit-reset"])
            except (ValueError, TypeError):
                reset_after = None
        raise exc_class(message, reset_after=reset_after, **kwargs)

    raise exc_class(message, **kwargs)
