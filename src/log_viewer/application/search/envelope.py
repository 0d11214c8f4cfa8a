"""Application search – parse the engine's response envelope into RawHits."""
from __future__ import annotations

from log_viewer.application.search.hit import RawHit
from log_viewer.kernel.errors import BackendProtocolError
from log_viewer.kernel.types import JsonValue, is_object, json_kind

__all__ = ["parse_envelope"]


def parse_envelope(payload: JsonValue) -> list[RawHit]:
    """Extract ``hits.hits`` from a search response.

    Expected shape::

        {"hits": {"hits": [{"_id": "...", "_source": {...},
                            "sort": [...], "highlight": {...}}, ...]}}

    ``sort`` and ``highlight`` are optional. ``_source`` must be present but
    its shape is left for the result mapper to judge.

    Raises:
        BackendProtocolError: the payload does not have that shape.
    """
    outer = _member(payload, "hits", "$")
    hits = _member(outer, "hits", "$.hits")
    if not isinstance(hits, list):
        raise BackendProtocolError(
            f"Expected an array at $.hits.hits, got {json_kind(hits)}",
            path="$.hits.hits",
        )
    return [_raw_hit(item, f"$.hits.hits[{index}]") for index, item in enumerate(hits)]


def _raw_hit(item: JsonValue, path: str) -> RawHit:
    if not is_object(item):
        raise BackendProtocolError(f"Expected an object at {path}, got {json_kind(item)}", path=path)

    hit_id = item.get("_id")
    if not isinstance(hit_id, str):
        raise BackendProtocolError(
            f"Expected a string at {path}._id, got {json_kind(hit_id)}",
            path=f"{path}._id",
        )
    if "_source" not in item:
        raise BackendProtocolError(f"Missing _source at {path}", path=f"{path}._source")

    sort = item.get("sort")
    match sort:
        case None:
            sort_keys = None
        case list():
            sort_keys = tuple(sort)
        case _:
            raise BackendProtocolError(
                f"Expected an array at {path}.sort, got {json_kind(sort)}",
                path=f"{path}.sort",
            )

    highlight = item.get("highlight")
    if highlight is not None and not is_object(highlight):
        raise BackendProtocolError(
            f"Expected an object at {path}.highlight, got {json_kind(highlight)}",
            path=f"{path}.highlight",
        )

    return RawHit(id=hit_id, source=item["_source"], sort=sort_keys, highlight=highlight)


def _member(node: JsonValue, key: str, path: str) -> JsonValue:
    if not is_object(node):
        raise BackendProtocolError(f"Expected an object at {path}, got {json_kind(node)}", path=path)
    if key not in node:
        raise BackendProtocolError(f"Missing '{key}' at {path}", path=path)
    return node[key]
