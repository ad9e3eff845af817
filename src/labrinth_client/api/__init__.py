"""Labrinth resource groups.

Each module holds the Operation descriptors of one group and a thin
ResourceApi class exposing them as methods.

Example:
    ```python
    from labrinth_client import ApiClient, Configuration
    from labrinth_client.api import NotificationsApi

    with ApiClient(Configuration.from_env()) as client:
        notifications = NotificationsApi(client)
        for notification in notifications.get_user_notifications("my_username"):
            print(notification.title)
    ```
"""

from labrinth_client.api.base import BoundEndpoint, Endpoint, ResourceApi
from labrinth_client.api.notifications import NotificationsApi
from labrinth_client.api.projects import ProjectsApi
from labrinth_client.api.users import UsersApi
from labrinth_client.api.versions import VersionsApi

__all__ = [
    "BoundEndpoint",
    "Endpoint",
    "NotificationsApi",
    "ProjectsApi",
    "ResourceApi",
    "UsersApi",
    "VersionsApi",
]
