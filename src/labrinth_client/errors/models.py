"""Structured error bodies returned by Labrinth."""

from dataclasses import dataclass


@dataclass
class AuthError:
    """Body of a 401 response.

    Labrinth answers with ``{"error": ..., "description": ...}`` when the token
    is missing, invalid, or lacks the scope required by the route.
    """

    error: str  # Machine-readable error name, e.g. "unauthorized"
    description: str  # Human-readable explanation

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        if self.error and self.description:
            return f"{self.error}: {self.description}"
        return self.description or self.error or "Unknown API error"
