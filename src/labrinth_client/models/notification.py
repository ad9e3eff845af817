"""Notification DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class NotificationType(StrEnum):
    PROJECT_UPDATE = "project_update"
    TEAM_INVITE = "team_invite"
    STATUS_CHANGE = "status_change"
    MODERATOR_MESSAGE = "moderator_message"


@dataclass
class NotificationAction:
    """An action the user can take on a notification, e.g. accepting a team invite."""

    title: str
    action_route: list[str]  # [HTTP method, route], e.g. ["POST", "team/{id}/join"]


@dataclass
class Notification:
    id: str
    user_id: str
    title: str
    text: str
    link: str
    read: bool
    created: datetime
    actions: list[NotificationAction] = field(default_factory=list)
    type: NotificationType | None = None
