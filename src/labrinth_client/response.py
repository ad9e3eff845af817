"""Decoded responses returned by the ``*_with_http_info`` call variants."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class RateLimit:
    """Rate limit state reported by Labrinth in every response.

    Informational only: the client never throttles or retries on its own.
    """

    limit: int | None = None  # Requests allowed per minute
    remaining: int | None = None  # Requests left in the current window
    reset: int | None = None  # Seconds until the window resets

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "RateLimit":
        return cls(
            limit=_int_header(headers, "X-Ratelimit-Limit"),
            remaining=_int_header(headers, "X-Ratelimit-Remaining"),
            reset=_int_header(headers, "X-Ratelimit-Reset"),
        )


def _int_header(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Decoded body together with the response metadata."""

    data: T
    status_code: int
    headers: httpx.Headers

    @property
    def rate_limit(self) -> RateLimit:
        return RateLimit.from_headers(self.headers)

    def __iter__(self) -> Any:
        # Allows ``data, status_code, headers = client.call_with_http_info(...)``
        return iter((self.data, self.status_code, self.headers))
