"""Testing utilities for code built on the Labrinth client.

Responses are served by ``httpx.MockTransport``, so the whole request
building and response decoding path runs without network access.

Example:
    ```python
    from labrinth_client.api import NotificationsApi
    from labrinth_client.testing import RecordingHandler, create_error_response, create_test_client


    def test_handles_missing_scope():
        handler = RecordingHandler({("GET", "/notification/abc"): create_error_response(401)})
        api = NotificationsApi(create_test_client(handler))
        ...
    ```
"""

from labrinth_client.testing.factories import (
    RecordingHandler,
    create_error_response,
    create_mock_response,
    create_test_client,
)

__all__ = [
    "RecordingHandler",
    "create_error_response",
    "create_mock_response",
    "create_test_client",
]
