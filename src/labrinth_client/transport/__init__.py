"""Transport construction for the Labrinth client.

The client never creates a process-wide HTTP client: it either receives
httpx clients from the caller or builds its own through these factories
and closes them when it is closed.

Example:
    ```python
    from labrinth_client.transport import create_async_http_client

    async with create_async_http_client(config) as http_client:
        client = ApiClient(config, async_http_client=http_client)
    ```
"""

from labrinth_client.transport.factory import create_async_http_client, create_http_client

__all__ = ["create_async_http_client", "create_http_client"]
