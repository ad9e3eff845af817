"""Expose Operation tables as methods of resource API classes."""

from typing import TYPE_CHECKING, Any

from labrinth_client.operation import Operation

if TYPE_CHECKING:
    from labrinth_client.client import ApiClient
    from labrinth_client.response import ApiResponse


class BoundEndpoint:
    """An operation bound to an ApiClient.

    Calling it runs the blocking call; the other variants are methods::

        api.get_notification("UwwJ73vb")
        api.get_notification.with_http_info("UwwJ73vb")
        await api.get_notification.acall("UwwJ73vb")
        await api.get_notification.acall_with_http_info("UwwJ73vb")
    """

    def __init__(self, api_client: "ApiClient", operation: Operation):
        self.api_client = api_client
        self.operation = operation

    def __repr__(self) -> str:
        return f"<BoundEndpoint {self.operation.operation_id} {self.operation.method} {self.operation.path}>"

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.api_client.call(self.operation, *args, **kwargs)

    def with_http_info(self, *args: Any, **kwargs: Any) -> "ApiResponse":
        return self.api_client.call_with_http_info(self.operation, *args, **kwargs)

    async def acall(self, *args: Any, **kwargs: Any) -> Any:
        return await self.api_client.acall(self.operation, *args, **kwargs)

    async def acall_with_http_info(self, *args: Any, **kwargs: Any) -> "ApiResponse":
        return await self.api_client.acall_with_http_info(self.operation, *args, **kwargs)


class Endpoint:
    """Class attribute turning an Operation into a method of a ResourceApi."""

    def __init__(self, operation: Operation, doc: str | None = None):
        self.operation = operation
        self.__doc__ = doc
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "ResourceApi | None", owner: type) -> "Endpoint | BoundEndpoint":
        if instance is None:
            return self
        return BoundEndpoint(instance.api_client, self.operation)


class ResourceApi:
    """Base class for a group of related operations (notifications, users, ...)."""

    def __init__(self, api_client: "ApiClient"):
        self.api_client = api_client

    @classmethod
    def operations(cls) -> dict[str, Operation]:
        """Operations exposed by this API, keyed by method name."""
        found: dict[str, Operation] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Endpoint):
                    found[name] = value.operation
        return found
