"""Application search – SearchBackend port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from log_viewer.application.search.query import QueryDocument
from log_viewer.kernel.types import JsonValue

__all__ = ["SearchBackend"]


@runtime_checkable
class SearchBackend(Protocol):
    """Port: run one search request against an index pattern."""

    async def search(self, index_pattern: str, body: QueryDocument) -> JsonValue: ...

    async def ping(self) -> bool: ...
