"""Build httpx clients configured for Labrinth.

The clients carry only transport concerns (timeout, redirects, an optional
custom transport). Headers, URLs and auth are set per request by the
request builder, so one httpx client can serve any Configuration.
"""

import logging

import httpx

from labrinth_client.configuration import Configuration

logger = logging.getLogger(__name__)


def create_http_client(
    config: Configuration,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a blocking httpx client.

    Args:
        config: Supplies the timeout
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests

    Example:
        ```python
        http_client = create_http_client(config)
        client = ApiClient(config, http_client=http_client)
        ```
    """
    logger.debug(f"Creating httpx.Client (timeout={config.timeout}s)")
    return httpx.Client(
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=True,
        transport=transport,
    )


def create_async_http_client(
    config: Configuration,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a non-blocking httpx client, see ``create_http_client``."""
    logger.debug(f"Creating httpx.AsyncClient (timeout={config.timeout}s)")
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=True,
        transport=transport,
    )
