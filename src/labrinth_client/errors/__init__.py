"""Error types and status-code mapping for the Labrinth client."""

from labrinth_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    DecodeError,
    ForbiddenError,
    GoneError,
    InvalidArgumentError,
    LabrinthError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from labrinth_client.errors.handler import decode_error_payload, exception_class_for, raise_for_status
from labrinth_client.errors.models import AuthError

__all__ = [
    "APIError",
    "AuthError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "DecodeError",
    "ForbiddenError",
    "GoneError",
    "InvalidArgumentError",
    "LabrinthError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "decode_error_payload",
    "exception_class_for",
    "raise_for_status",
]
