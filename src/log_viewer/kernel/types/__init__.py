"""Kernel types – JSON value model."""
from log_viewer.kernel.types.json import JsonObject, JsonScalar, JsonValue, is_object, json_kind

__all__ = ["JsonObject", "JsonScalar", "JsonValue", "is_object", "json_kind"]
