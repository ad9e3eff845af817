"""Structured exceptions raised by the Labrinth client."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class LabrinthError(Exception):
    """Base exception for everything raised by the client."""

    pass


class ConfigurationError(LabrinthError):
    """Raised when the client configuration cannot be used (e.g. debug sink)."""

    pass


class InvalidArgumentError(LabrinthError, ValueError):
    """A required parameter is missing or empty, or a parameter is unknown.

    Raised while building the request, before any network access.
    """

    def __init__(self, message: str, parameter: str | None = None, operation_id: str | None = None):
        super().__init__(message)
        self.parameter = parameter
        self.operation_id = operation_id


class TransportError(LabrinthError):
    """No response was obtained (DNS, connect, timeout, protocol errors).

    The underlying httpx exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, request: "httpx.Request | None" = None):
        super().__init__(message)
        self.request = request
        self.status_code: int | None = None


class APIError(LabrinthError):
    """A response was received with a status outside 2xx."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        headers: "httpx.Headers | None" = None,
        body: str | None = None,
        response: "httpx.Response | None" = None,
        error_payload: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers
        self.body = body
        self.response = response
        self.error_payload = error_payload


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized (missing token or insufficient scope)."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class GoneError(ClientError):
    """410 Gone: the API version has been retired and will never answer again."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, reset_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reset_after = reset_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class DecodeError(LabrinthError):
    """A successful response body did not match the declared schema."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        headers: "httpx.Headers | None" = None,
        body: str | None = None,
        model: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers
        self.body = body
        self.model = model
