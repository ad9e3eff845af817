"""Generic client that executes Operation descriptors."""

import logging
from typing import Any, get_origin

import httpx

from labrinth_client import serializer
from labrinth_client.configuration import Configuration
from labrinth_client.errors.exceptions import DecodeError, TransportError
from labrinth_client.errors.handler import raise_for_status
from labrinth_client.operation import Operation
from labrinth_client.request import bind_arguments, build_request
from labrinth_client.response import ApiResponse
from labrinth_client.transport import create_async_http_client, create_http_client

logger = logging.getLogger(__name__)


class ApiClient:
    """Execute Labrinth operations over httpx.

    Each operation can be called four ways, all sharing the same request
    building and response handling:

    - ``call``: blocking, returns the decoded body
    - ``call_with_http_info``: blocking, returns an ``ApiResponse``
    - ``acall`` / ``acall_with_http_info``: coroutines on ``httpx.AsyncClient``

    The client keeps no per-call state, so one instance can serve
    concurrent threads and tasks.

    Example:
        ```python
        from labrinth_client import ApiClient, Configuration
        from labrinth_client.api.notifications import GET_NOTIFICATION

        with ApiClient(Configuration.from_env()) as client:
            notification = client.call(GET_NOTIFICATION, "UwwJ73vb")
        ```
    """

    def __init__(
        self,
        config: Configuration,
        *,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration.
            http_client: httpx client for blocking calls. One is created (and
                closed by ``close``) when omitted.
            async_http_client: httpx client for coroutine calls. When omitted, one
                is created on the first coroutine call and closed by ``aclose``.

        Raises:
            ConfigurationError: If debug output is enabled and its sink cannot
                be opened.
        """
        self.config = config

        self._debug_sink = config.open_debug_sink() if config.debug else None
        self._owns_debug_sink = config.debug and config.debug_file is not None

        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(config)

        self._owns_async_http_client = async_http_client is None
        self._async_http_client = async_http_client

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def close(self) -> None:
        """Close the httpx client and debug file this client created."""
        if self._owns_http_client:
            self._http_client.close()
        if self._owns_debug_sink and self._debug_sink is not None:
            self._debug_sink.close()
            self._debug_sink = None

    async def aclose(self) -> None:
        """Close everything this client created, including the async httpx client."""
        if self._owns_async_http_client and self._async_http_client is not None:
            await self._async_http_client.aclose()
            self._async_http_client = None
        self.close()

    def build_request(
        self, operation: Operation, *args: Any, content_type: str | None = None, **params: Any
    ) -> httpx.Request:
        """Build the request for a call without sending it."""
        bound = bind_arguments(operation, args, params)
        return build_request(self.config, operation, bound, content_type=content_type)

    def call(self, operation: Operation, *args: Any, content_type: str | None = None, **params: Any) -> Any:
        """Execute an operation and return its decoded body (None for void operations)."""
        return self.call_with_http_info(operation, *args, content_type=content_type, **params).data

    def call_with_http_info(
        self, operation: Operation, *args: Any, content_type: str | None = None, **params: Any
    ) -> ApiResponse:
        """Execute an operation and return the decoded body with status and headers.

        Raises:
            InvalidArgumentError: A required parameter is missing (nothing is sent).
            TransportError: No response was received.
            APIError: The response status is outside 2xx.
            DecodeError: The body does not match the declared model.
        """
        request = self.build_request(operation, *args, content_type=content_type, **params)
        self._trace(f"> {request.method} {request.url}")
        try:
            response = self._http_client.send(request)
        except httpx.RequestError as e:
            raise self._transport_error(operation, request, e) from e
        return self._handle_response(operation, response)

    async def acall(self, operation: Operation, *args: Any, content_type: str | None = None, **params: Any) -> Any:
        """Coroutine variant of ``call``."""
        response = await self.acall_with_http_info(operation, *args, content_type=content_type, **params)
        return response.data

    async def acall_with_http_info(
        self, operation: Operation, *args: Any, content_type: str | None = None, **params: Any
    ) -> ApiResponse:
        """Coroutine variant of ``call_with_http_info``."""
        request = self.build_request(operation, *args, content_type=content_type, **params)
        self._trace(f"> {request.method} {request.url}")
        try:
            response = await self._get_async_http_client().send(request)
        except httpx.RequestError as e:
            raise self._transport_error(operation, request, e) from e
        return self._handle_response(operation, response)

    def _get_async_http_client(self) -> httpx.AsyncClient:
        # Created on the first coroutine call
        if self._async_http_client is None:
            self._async_http_client = create_async_http_client(self.config)
        return self._async_http_client

    def _transport_error(self, operation: Operation, request: httpx.Request, exc: Exception) -> TransportError:
        logger.warning(f"{operation.operation_id}: {request.method} {request.url} failed: {exc}")
        self._trace(f"! {request.method} {request.url} {exc.__class__.__name__}")
        return TransportError(f"Error connecting to the API ({request.url}): {exc}", request=request)

    def _handle_response(self, operation: Operation, response: httpx.Response) -> ApiResponse:
        status_code = response.status_code
        self._trace(f"< {status_code} {response.request.url}")
        logger.debug(f"{operation.operation_id}: {response.request.method} {response.request.url} -> {status_code}")

        if not response.is_success:
            raise_for_status(response, operation.error_model(status_code))

        model = operation.success_model(status_code)
        data = self._deserialize(response, model)
        return ApiResponse(data=data, status_code=status_code, headers=response.headers)

    def _deserialize(self, response: httpx.Response, model: Any) -> Any:
        if model is None:
            return None
        if model is bytes:
            return response.content
        if model is str:
            return response.text

        try:
            payload = response.json()
        except ValueError as e:
            raise _decode_error(response, model, f"invalid JSON ({e})") from e

        try:
            return serializer.deserialize(payload, model)
        except ValueError as e:
            raise _decode_error(response, model, str(e)) from e

    def _trace(self, line: str) -> None:
        if self._debug_sink is None:
            return
        self._debug_sink.write(line + "\n")
        self._debug_sink.flush()


def _decode_error(response: httpx.Response, model: Any, reason: str) -> DecodeError:
    # list[Notification] and friends print better with repr
    name = repr(model) if get_origin(model) is not None else getattr(model, "__name__", repr(model))
    return DecodeError(
        f"[{response.status_code}] Response body is not a valid {name}: {reason}",
        status_code=response.status_code,
        headers=response.headers,
        body=response.text,
        model=model,
    )
