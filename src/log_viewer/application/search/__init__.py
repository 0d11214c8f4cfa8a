"""Application search – query translation and result normalization."""
from log_viewer.application.search.envelope import parse_envelope
from log_viewer.application.search.fields import sanitize_key, sanitize_keys
from log_viewer.application.search.filter import SearchFilter, SortOrder
from log_viewer.application.search.gateway import SearchGateway
from log_viewer.application.search.hit import Hit, RawHit
from log_viewer.application.search.mapper import map_hit, map_hits
from log_viewer.application.search.ports import SearchBackend
from log_viewer.application.search.query import (
    HIGHLIGHT_POST_TAG,
    HIGHLIGHT_PRE_TAG,
    MESSAGE_FIELD,
    TIMESTAMP_FIELD,
    QueryDocument,
    build_query,
)

__all__ = [
    "HIGHLIGHT_POST_TAG",
    "HIGHLIGHT_PRE_TAG",
    "Hit",
    "MESSAGE_FIELD",
    "QueryDocument",
    "RawHit",
    "SearchBackend",
    "SearchFilter",
    "SearchGateway",
    "SortOrder",
    "TIMESTAMP_FIELD",
    "build_query",
    "map_hit",
    "map_hits",
    "parse_envelope",
    "sanitize_key",
    "sanitize_keys",
]
