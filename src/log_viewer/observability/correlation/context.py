"""Observability – per-request correlation ids.

One :class:`RequestContext` is resolved from the inbound headers of each
search request. Its ``correlation_id`` ends up on every log event, in the
error body, on the response and on the outbound request to the search
backend.
"""
from __future__ import annotations

import dataclasses
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    correlation_id: str
    trace_id: str | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RequestContext:
        """Resolve ids from inbound headers (names are case-insensitive).

        The correlation id is the first non-blank of ``X-Correlation-ID``,
        ``X-Request-ID`` and the W3C ``traceparent`` trace-id, else a new
        UUID4. ``trace_id`` is set only from ``traceparent``.
        """
        values = {name.lower(): value.strip() for name, value in headers.items()}
        trace_id = _trace_id(values.get("traceparent", ""))
        correlation_id = (
            values.get("x-correlation-id")
            or values.get("x-request-id")
            or trace_id
            or str(uuid4())
        )
        return cls(correlation_id=correlation_id, trace_id=trace_id)


def _trace_id(traceparent: str) -> str | None:
    # {version}-{trace-id}-{parent-id}-{flags}
    parts = traceparent.split("-")
    if len(parts) >= 2 and parts[1]:
        return parts[1]
    return None


_current: ContextVar[RequestContext | None] = ContextVar("log_viewer_request_context", default=None)


class CorrelationContext:
    """Access to the :class:`RequestContext` of the running task."""

    @staticmethod
    def get() -> RequestContext | None:
        return _current.get()

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _current.set(ctx)

    @staticmethod
    def clear() -> None:
        _current.set(None)

    @staticmethod
    @contextmanager
    def scope(ctx: RequestContext) -> Iterator[RequestContext]:
        """Make *ctx* current for the block, then restore the previous one."""
        token = _current.set(ctx)
        try:
            yield ctx
        finally:
            _current.reset(token)


__all__ = ["CorrelationContext", "RequestContext"]
