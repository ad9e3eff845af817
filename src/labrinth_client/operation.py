"""Static descriptions of remote operations.

Each Labrinth endpoint is one ``Operation`` value. The client reads it to
build requests and to decide how to decode each response, so adding an
endpoint never needs new request or response code.

Example:
    ```python
    GET_NOTIFICATION = Operation(
        operation_id="getNotification",
        method="GET",
        path="/notification/{id}",
        parameters=(path_param("id"),),
        return_type=Notification,
        responses={200: returns(Notification), 401: raises(AuthError)},
    )
    ```
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, NamedTuple

from labrinth_client.headers import JSON_MIME

ParameterLocation = Literal["path", "query", "header", "form", "body"]
QueryStyle = Literal["form", "spaceDelimited", "pipeDelimited"]

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


@dataclass(frozen=True)
class Parameter:
    """One declared parameter of an operation."""

    name: str
    location: ParameterLocation
    required: bool = False
    wire_name: str | None = None  # Placeholder or wire key when it differs from name
    style: QueryStyle = "form"
    explode: bool = True
    array: bool = False
    type: Any = str  # Scalar type, or element type of an array

    @property
    def key(self) -> str:
        return self.wire_name or self.name


class ResponseType(NamedTuple):
    """What a status code carries: the body model and whether it is an error."""

    model: Any
    is_error: bool = False


def returns(model: Any) -> ResponseType:
    return ResponseType(model, False)


def raises(model: Any) -> ResponseType:
    return ResponseType(model, True)


def path_param(name: str, wire_name: str | None = None, *, type: Any = str) -> Parameter:
    return Parameter(name, "path", required=True, wire_name=wire_name, type=type)


def query_param(
    name: str,
    required: bool = False,
    *,
    array: bool = False,
    style: QueryStyle = "form",
    explode: bool = True,
    type: Any = str,
) -> Parameter:
    return Parameter(name, "query", required=required, style=style, explode=explode, array=array, type=type)


def header_param(name: str, wire_name: str, required: bool = False) -> Parameter:
    return Parameter(name, "header", required=required, wire_name=wire_name)


def form_param(name: str, required: bool = False) -> Parameter:
    return Parameter(name, "form", required=required)


def body_param(name: str, required: bool = True) -> Parameter:
    return Parameter(name, "body", required=required)


@dataclass(frozen=True)
class Operation:
    """Descriptor of one remote operation.

    Attributes:
        operation_id: Name of the operation in the API description.
        method: HTTP method.
        path: Path template relative to the host, e.g. ``/notification/{id}``.
        parameters: Declared parameters; their order is the positional order.
        content_types: Request content types, the first one is the default.
        accept: Acceptable response content types.
        return_type: Default success model, ``None`` for operations without
            a response body, ``bytes``/``str`` for raw bodies.
        responses: Models per status code (``200``), status range (``"4XX"``)
            or ``"default"``.
        auth: API key identifier attached to the request when configured.
    """

    operation_id: str
    method: str
    path: str
    parameters: tuple[Parameter, ...] = ()
    content_types: tuple[str, ...] = (JSON_MIME,)
    accept: tuple[str, ...] = (JSON_MIME,)
    return_type: Any = None
    responses: Mapping[int | str, ResponseType] = field(default_factory=dict)
    auth: str | None = "Authorization"

    def __post_init__(self):
        placeholders = set(PLACEHOLDER_PATTERN.findall(self.path))
        declared = {p.key for p in self.parameters if p.location == "path"}
        if placeholders != declared:
            raise ValueError(
                f"{self.operation_id}: path placeholders {sorted(placeholders)} "
                f"do not match path parameters {sorted(declared)}"
            )

        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"{self.operation_id}: duplicate parameter names {names}")

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    def parameters_in(self, location: ParameterLocation) -> list[Parameter]:
        return [p for p in self.parameters if p.location == location]

    def response_for(self, status_code: int) -> ResponseType | None:
        """Look up the declared response for a status code.

        Exact codes win over ranges (``"2XX"``), which win over ``"default"``.
        """
        if status_code in self.responses:
            return self.responses[status_code]
        status_range = f"{status_code // 100}XX"
        if status_range in self.responses:
            return self.responses[status_range]
        return self.responses.get("default")

    def success_model(self, status_code: int) -> Any:
        """Model to decode a 2xx response with."""
        response = self.response_for(status_code)
        if response is not None and not response.is_error:
            return response.model
        return self.return_type

    def error_model(self, status_code: int) -> Any:
        """Model to decode a non-2xx response body with, if declared."""
        response = self.response_for(status_code)
        if response is not None and response.is_error:
            return response.model
        return None
