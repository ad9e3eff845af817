"""Build httpx requests from an Operation and call arguments.

Nothing here performs I/O: ``build_request`` returns an ``httpx.Request``
that the client sends through its transport.
"""

import io
import logging
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote

import httpx

from labrinth_client import serializer
from labrinth_client.configuration import Configuration
from labrinth_client.errors.exceptions import InvalidArgumentError
from labrinth_client.headers import is_json_mime, select_headers
from labrinth_client.operation import PLACEHOLDER_PATTERN, Operation, Parameter

logger = logging.getLogger(__name__)


def bind_arguments(operation: Operation, args: tuple, kwargs: Mapping[str, Any]) -> dict[str, Any]:
    """Map positional and keyword arguments onto the operation's parameters.

    Raises:
        InvalidArgumentError: On too many positional arguments, duplicate
            values, or names the operation does not declare.
    """
    names = operation.parameter_names
    if len(args) > len(names):
        raise InvalidArgumentError(
            f"{operation.operation_id} takes {len(names)} positional arguments but {len(args)} were given",
            operation_id=operation.operation_id,
        )

    params = dict(zip(names, args))
    for name, value in kwargs.items():
        if name in params:
            raise InvalidArgumentError(
                f"Got multiple values for parameter {name} when calling {operation.operation_id}",
                parameter=name,
                operation_id=operation.operation_id,
            )
        params[name] = value

    unknown = sorted(set(params) - set(names))
    if unknown:
        raise InvalidArgumentError(
            f"Unknown parameter {unknown[0]} when calling {operation.operation_id}",
            parameter=unknown[0],
            operation_id=operation.operation_id,
        )
    return params


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _is_binary(value: Any) -> bool:
    if isinstance(value, (bytes, bytearray, io.IOBase)):
        return True
    if serializer.is_collection(value):
        return any(_is_binary(item) for item in value)
    return False


def validate_parameters(operation: Operation, params: Mapping[str, Any]) -> None:
    """Check required parameters are present and non-empty.

    Raises:
        InvalidArgumentError: For the first missing or empty required parameter.
    """
    for parameter in operation.parameters:
        if parameter.required and _is_empty(params.get(parameter.name)):
            raise InvalidArgumentError(
                f"Missing the required parameter {parameter.name} when calling {operation.operation_id}",
                parameter=parameter.name,
                operation_id=operation.operation_id,
            )

    unknown = sorted(set(params) - set(operation.parameter_names))
    if unknown:
        raise InvalidArgumentError(
            f"Unknown parameter {unknown[0]} when calling {operation.operation_id}",
            parameter=unknown[0],
            operation_id=operation.operation_id,
        )


def build_path(operation: Operation, params: Mapping[str, Any]) -> str:
    """Substitute path parameters into the operation's path template."""
    path = operation.path
    for parameter in operation.parameters_in("path"):
        value = params.get(parameter.name)
        if serializer.is_collection(value) or isinstance(value, Mapping):
            raise InvalidArgumentError(
                f"Path parameter {parameter.name} of {operation.operation_id} must be a scalar",
                parameter=parameter.name,
                operation_id=operation.operation_id,
            )
        path = path.replace("{" + parameter.key + "}", serializer.to_path_value(value))
    return path


def build_query(operation: Operation, params: Mapping[str, Any]) -> str:
    """Encode query parameters, exploding arrays where declared."""
    pairs: list[tuple[str, str]] = []
    for parameter in operation.parameters_in("query"):
        pairs.extend(
            serializer.to_query_value(parameter.key, params.get(parameter.name), parameter.style, parameter.explode)
        )
    return str(httpx.QueryParams(pairs))


def _build_form_body(form: dict[str, Any], content_type: str | None) -> tuple[dict[str, Any], bool]:
    """Return httpx body keyword arguments for form parameters and whether they are multipart."""
    if any(_is_binary(value) for value in form.values()):
        files: list[tuple[str, Any]] = []
        data: dict[str, Any] = {}
        for name, value in form.items():
            items = value if serializer.is_collection(value) else [value]
            for item in items:
                if _is_binary(item):
                    files.append((name, item))
                else:
                    data.setdefault(name, []).append(serializer.to_string(item))
        return {"files": files, "data": data}, True

    if is_json_mime(content_type):
        return {"json": {name: serializer.sanitize_for_serialization(value) for name, value in form.items()}}, False

    encoded = {
        name: [serializer.to_string(item) for item in value]
        if serializer.is_collection(value)
        else serializer.to_string(value)
        for name, value in form.items()
    }
    return {"data": encoded}, False


def build_request(
    config: Configuration,
    operation: Operation,
    params: Mapping[str, Any],
    *,
    content_type: str | None = None,
) -> httpx.Request:
    """Build the request for one call of ``operation``.

    Args:
        config: Client configuration (host, token, user agent)
        operation: Descriptor of the remote operation
        params: Arguments keyed by parameter name
        content_type: Request content type; defaults to the operation's first
            declared type

    Returns:
        The request, ready to send

    Raises:
        InvalidArgumentError: If a required parameter is missing or empty
    """
    validate_parameters(operation, params)

    if content_type is None and operation.content_types:
        content_type = operation.content_types[0]

    path = build_path(operation, params)
    query = build_query(operation, params)
    url = config.get_host() + path + (f"?{query}" if query else "")

    body_kwargs: dict[str, Any] = {}
    is_multipart = False

    form = {p.key: params[p.name] for p in operation.parameters_in("form") if params.get(p.name) is not None}
    if form:
        body_kwargs, is_multipart = _build_form_body(form, content_type)

    for parameter in operation.parameters_in("body"):
        value = params.get(parameter.name)
        if value is not None:
            body_kwargs = {"json": serializer.sanitize_for_serialization(value)}

    # Lowest to highest precedence
    headers = httpx.Headers()
    if config.user_agent:
        headers["User-Agent"] = config.user_agent

    for parameter in operation.parameters_in("header"):
        value = params.get(parameter.name)
        if value is not None:
            headers[parameter.key] = serializer.to_string(value)

    headers.update(select_headers(operation.accept, content_type, is_multipart))
    if is_multipart:
        # httpx generates the header itself so it can carry the boundary
        del headers["Content-Type"]

    if operation.auth:
        api_key = config.get_api_key_with_prefix(operation.auth)
        if api_key is not None:
            headers[operation.auth] = api_key

    logger.debug(f"Built {operation.operation_id} request: {operation.method} {url}")
    return httpx.Request(
        operation.method,
        url,
        headers=headers,
        # Client.send() does not apply the client's timeout to prebuilt requests
        extensions={"timeout": httpx.Timeout(config.timeout).as_dict()},
        **body_kwargs,
    )


def _path_pattern(operation: Operation) -> tuple[re.Pattern, dict[str, str]]:
    # Placeholders such as "id|username" are not valid group names, so groups are numbered
    groups: dict[str, str] = {}
    pattern = ""
    position = 0
    for index, match in enumerate(PLACEHOLDER_PATTERN.finditer(operation.path)):
        groups[f"p{index}"] = match.group(1)
        pattern += re.escape(operation.path[position : match.start()]) + f"(?P<p{index}>[^/]+)"
        position = match.end()
    pattern += re.escape(operation.path[position:])
    return re.compile(pattern + "$"), groups


def parse_request(operation: Operation, request: httpx.Request) -> dict[str, Any]:
    """Recover path and query parameter values from a built request.

    Values are decoded with each parameter's declared type; array query
    parameters come back as lists.

    Raises:
        ValueError: If the request path does not match the operation, or a
            value does not decode as its declared type.
    """
    pattern, groups = _path_pattern(operation)
    raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
    match = pattern.search(raw_path)
    if match is None:
        raise ValueError(f"{raw_path} does not match {operation.operation_id} path {operation.path}")

    by_key = {p.key: p for p in operation.parameters_in("path")}
    params: dict[str, Any] = {}
    for group, key in groups.items():
        parameter = by_key[key]
        params[parameter.name] = serializer.deserialize(unquote(match.group(group)), parameter.type)

    query = request.url.params
    for parameter in operation.parameters_in("query"):
        values = query.get_list(parameter.key)
        if not values:
            continue
        params[parameter.name] = _parse_query_parameter(parameter, values)

    return params


def _parse_query_parameter(parameter: Parameter, values: list[str]) -> Any:
    if not parameter.array:
        return serializer.deserialize(values[0], parameter.type)
    items = serializer.from_query_value(values, parameter.style, parameter.explode)
    return [serializer.deserialize(item, parameter.type) for item in items]
