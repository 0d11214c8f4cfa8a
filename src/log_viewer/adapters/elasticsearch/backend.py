"""Elasticsearch adapter – SearchBackend over the engine's JSON/HTTP API."""
from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from log_viewer.adapters.http.client import HttpxHttpClient
from log_viewer.application.search.query import QueryDocument
from log_viewer.kernel.errors import BackendProtocolError, InfrastructureError
from log_viewer.kernel.types import JsonValue
from log_viewer.observability.logging import get_logger

if TYPE_CHECKING:
    from log_viewer.config.app_settings import LogViewerSettings

_log = get_logger(__name__)


class ElasticsearchSearchBackend:
    """Issue ``POST /{index}/_search`` requests through a shared httpx client.

    One instance is shared by all concurrent requests; it holds no mutable
    state of its own.
    """

    def __init__(self, client: HttpxHttpClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: "LogViewerSettings") -> "ElasticsearchSearchBackend":
        return cls(HttpxHttpClient(base_url=settings.elastic_url.rstrip("/")))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search(self, index_pattern: str, body: QueryDocument) -> JsonValue:
        path = f"/{quote(index_pattern, safe='*,-_.')}/_search"
        response = await self._client.post(path, json=body)
        try:
            return response.json()
        except ValueError as exc:
            raise BackendProtocolError(
                f"Search response from {path} is not valid JSON",
                path="$",
                detail={"content_type": response.headers.get("content-type")},
                cause=exc,
            ) from exc

    async def ping(self) -> bool:
        try:
            await self._client.get("/")
        except InfrastructureError as exc:
            _log.warning("backend_ping_failed", error=exc.code, message=exc.message)
            return False
        return True


__all__ = ["ElasticsearchSearchBackend"]
