"""Data transfer objects mirroring the Labrinth JSON schemas."""

from labrinth_client.errors.models import AuthError
from labrinth_client.models.notification import Notification, NotificationAction, NotificationType
from labrinth_client.models.project import (
    EditableProject,
    Project,
    ProjectIdentifier,
    ProjectLicense,
    ProjectStatus,
    ProjectType,
    SideType,
)
from labrinth_client.models.user import User, UserRole
from labrinth_client.models.version import (
    DependencyType,
    Version,
    VersionDependency,
    VersionFile,
    VersionFileHashes,
    VersionType,
)

__all__ = [
    "AuthError",
    "DependencyType",
    "EditableProject",
    "Notification",
    "NotificationAction",
    "NotificationType",
    "Project",
    "ProjectIdentifier",
    "ProjectLicense",
    "ProjectStatus",
    "ProjectType",
    "SideType",
    "User",
    "UserRole",
    "Version",
    "VersionDependency",
    "VersionFile",
    "VersionFileHashes",
    "VersionType",
]
