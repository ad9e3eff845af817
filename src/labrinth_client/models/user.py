"""User DTOs."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class UserRole(StrEnum):
    ADMIN = "admin"
    MODERATOR = "moderator"
    DEVELOPER = "developer"


@dataclass
class User:
    """A Modrinth user.

    ``email`` is only filled in for the authenticated user or with the
    ``USER_READ_EMAIL`` scope.
    """

    id: str
    username: str
    avatar_url: str
    created: datetime
    role: UserRole
    name: str | None = None
    email: str | None = None
    bio: str | None = None
    badges: int = 0
