"""JSON value model shared by the query builder and the result mapper."""

from __future__ import annotations

from typing import TypeAlias, TypeGuard, Union

JsonScalar: TypeAlias = Union[None, bool, int, float, str]
JsonValue: TypeAlias = Union[JsonScalar, list["JsonValue"], dict[str, "JsonValue"]]
JsonObject: TypeAlias = dict[str, JsonValue]


def json_kind(value: object) -> str:
    """Name the JSON node kind of *value* (``object``, ``array``, ``string``, …)."""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list() | tuple():
            return "array"
        case dict():
            return "object"
        case _:
            return type(value).__name__


def is_object(value: object) -> TypeGuard[JsonObject]:
    """Return ``True`` when *value* is an object node with string keys."""
    match value:
        case dict():
            return all(isinstance(key, str) for key in value)
        case _:
            return False


__all__ = ["JsonObject", "JsonScalar", "JsonValue", "is_object", "json_kind"]
