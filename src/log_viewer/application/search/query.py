"""Application search – SearchFilter → engine query document."""
from __future__ import annotations

from datetime import date
from typing import Final, TypeAlias

from log_viewer.application.search.filter import SearchFilter
from log_viewer.kernel.types import JsonObject, JsonValue
from log_viewer.observability.logging import get_logger

__all__ = [
    "HIGHLIGHT_POST_TAG",
    "HIGHLIGHT_PRE_TAG",
    "MESSAGE_FIELD",
    "QueryDocument",
    "TIMESTAMP_FIELD",
    "build_query",
]

QueryDocument: TypeAlias = JsonObject

TIMESTAMP_FIELD: Final = "@timestamp"
MESSAGE_FIELD: Final = "message"
HIGHLIGHT_PRE_TAG: Final = "<span class='highlight'>"
HIGHLIGHT_POST_TAG: Final = "</span>"

_log = get_logger(__name__)


def build_query(search_filter: SearchFilter, *, highlight: bool = True) -> QueryDocument:
    """Translate *search_filter* into a search-engine request body.

    The result has a ``bool.must`` clause list (empty means match-all), the
    page ``size``, one sort clause on :data:`TIMESTAMP_FIELD` and, when the
    filter carries a cursor, ``search_after``. The free-text query is passed
    to ``simple_query_string`` unescaped so the engine's operators apply.

    A range clause is emitted as soon as one bound is set; the missing bound
    is ``None`` (no constraint on that side). Inverted bounds are passed
    through as given.

    ``highlight`` only asks the engine for marked-up message fragments; it
    never changes which hits come back or their order.
    """
    must: list[JsonValue] = []

    if search_filter.query:
        must.append({"simple_query_string": {"query": search_filter.query}})

    if search_filter.has_date_range:
        must.append(
            {
                "range": {
                    TIMESTAMP_FIELD: {
                        "gte": _iso(search_filter.start_date),
                        "lte": _iso(search_filter.end_date),
                    }
                }
            }
        )

    document: QueryDocument = {
        "query": {"bool": {"must": must}},
        "size": search_filter.size,
        "sort": [{TIMESTAMP_FIELD: {"order": search_filter.order.value}}],
    }

    if search_filter.search_after is not None:
        document["search_after"] = list(search_filter.search_after)

    if highlight:
        document["highlight"] = {
            "fields": {MESSAGE_FIELD: {}},
            "pre_tags": [HIGHLIGHT_PRE_TAG],
            "post_tags": [HIGHLIGHT_POST_TAG],
        }

    _log.debug("query_built", query=document)
    return document


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None
