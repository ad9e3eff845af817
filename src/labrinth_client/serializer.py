"""Conversion between JSON values, DTOs and wire strings.

DTOs are plain dataclasses. Validation and dumping go through pydantic's
``TypeAdapter``, which understands dataclasses, ``datetime``, enums and
nested ``list[Model]`` annotations without any per-model code.

Example:
    ```python
    from labrinth_client import serializer
    from labrinth_client.models import Notification

    notifications = serializer.deserialize(payload, list[Notification])
    body = serializer.sanitize_for_serialization(notifications[0])
    ```
"""

from datetime import date, datetime
from enum import Enum
from functools import lru_cache
from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter

# Separators used when an array query parameter is not exploded
COLLECTION_SEPARATORS = {
    "form": ",",
    "spaceDelimited": " ",
    "pipeDelimited": "|",
}


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def deserialize(data: Any, model: Any) -> Any:
    """Map decoded JSON onto ``model``.

    Args:
        data: Value produced by ``json.loads`` / ``response.json()``
        model: Target type, e.g. ``Notification`` or ``list[Notification]``

    Returns:
        An instance of ``model``

    Raises:
        pydantic.ValidationError: If the data does not match the schema
            (a ``ValueError`` subclass)
    """
    if model is None or model is Any:
        return data
    return _adapter(model).validate_python(data)


def sanitize_for_serialization(value: Any) -> Any:
    """Turn a DTO (or list/dict of DTOs) into JSON-compatible values.

    Unset (``None``) fields are dropped so partial PATCH bodies only carry
    the fields the caller filled in.
    """
    if value is None:
        return None
    return _adapter(type(value)).dump_python(value, mode="json", exclude_none=True)


def to_string(value: Any) -> str:
    """Convert a scalar to its wire representation."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def to_path_value(value: Any) -> str:
    """Convert a path parameter value to a fully percent-encoded segment."""
    return quote(to_string(value), safe="")


def is_collection(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def to_query_value(name: str, value: Any, style: str = "form", explode: bool = True) -> list[tuple[str, str]]:
    """Serialize one query parameter into ``(name, value)`` pairs.

    Exploded arrays repeat the name once per element (``ids=a&ids=b``);
    non-exploded arrays are joined with the style's separator
    (``ids=a,b``). ``None`` produces no pairs.
    """
    if value is None:
        return []

    if not is_collection(value):
        return [(name, to_string(value))]

    items = [to_string(item) for item in value]
    if explode:
        return [(name, item) for item in items]

    try:
        separator = COLLECTION_SEPARATORS[style]
    except KeyError:
        raise ValueError(f"Unsupported query style: {style}") from None
    return [(name, separator.join(items))]


def from_query_value(values: list[str], style: str = "form", explode: bool = True) -> list[str]:
    """Inverse of ``to_query_value`` for the values collected under one name."""
    if explode:
        return list(values)
    separator = COLLECTION_SEPARATORS[style]
    result: list[str] = []
    for value in values:
        result.extend(value.split(separator))
    return result
