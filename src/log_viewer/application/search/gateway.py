"""Application search – SearchGateway: filter in, normalized hits out."""
from __future__ import annotations

from log_viewer.application.search.envelope import parse_envelope
from log_viewer.application.search.filter import SearchFilter
from log_viewer.application.search.hit import Hit
from log_viewer.application.search.mapper import map_hits
from log_viewer.application.search.ports import SearchBackend
from log_viewer.application.search.query import build_query
from log_viewer.observability.logging import get_logger

__all__ = ["SearchGateway"]

_log = get_logger(__name__)


class SearchGateway:
    """Run one search round trip per :meth:`fetch` call.

    Retries, timeouts and connection reuse belong to the backend transport.
    Every error propagates to the caller unchanged and no partial page is
    returned.
    """

    def __init__(self, backend: SearchBackend, *, highlight: bool = True) -> None:
        self._backend = backend
        self._highlight = highlight

    @property
    def backend(self) -> SearchBackend:
        return self._backend

    async def fetch(self, index_pattern: str, search_filter: SearchFilter) -> list[Hit]:
        body = build_query(search_filter, highlight=self._highlight)
        _log.info(
            "search_started",
            index=index_pattern,
            size=search_filter.size,
            order=search_filter.order.value,
            has_query=bool(search_filter.query),
            has_cursor=search_filter.search_after is not None,
        )
        payload = await self._backend.search(index_pattern, body)
        hits = map_hits(parse_envelope(payload))
        _log.debug("search_completed", index=index_pattern, hits=len(hits))
        return hits
