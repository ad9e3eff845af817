"""Labrinth client - typed HTTP client for the Modrinth (Labrinth) REST API.

Every remote endpoint is described once as an ``Operation``; a single
``ApiClient`` builds the request, sends it through httpx and decodes the
response into dataclass DTOs:
- Descriptor tables per resource group (``labrinth_client.api``)
- Blocking and asyncio variants of every call
- Typed errors for invalid arguments, transport failures, HTTP statuses
  and undecodable bodies
- Token and settings resolution from the environment and .env files

Example:
    ```python
    from labrinth_client import ApiClient, Configuration
    from labrinth_client.api import NotificationsApi
    from labrinth_client.errors import UnauthorizedError

    config = Configuration.from_env(user_agent="me/my-launcher/1.0")

    with ApiClient(config) as client:
        try:
            notifications = NotificationsApi(client).get_user_notifications("my_username")
        except UnauthorizedError as e:
            print(e.error_payload.description)
    ```
"""

__version__ = "0.1.0"

from labrinth_client.client import ApiClient  # noqa: E402
from labrinth_client.configuration import Configuration  # noqa: E402
from labrinth_client.operation import Operation, Parameter  # noqa: E402
from labrinth_client.response import ApiResponse, RateLimit  # noqa: E402

__all__ = [
    "ApiClient",
    "ApiResponse",
    "Configuration",
    "Operation",
    "Parameter",
    "RateLimit",
    "__version__",
]
