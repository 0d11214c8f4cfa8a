"""FastAPI adapter – correlation-ID ASGI middleware."""
from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from log_viewer.observability.correlation import CorrelationContext, RequestContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send


class FastAPICorrelationIdMiddleware:
    """Resolve a :class:`RequestContext` per HTTP request.

    The context is current while the request is handled (exception handlers
    included), the request method and path are bound to structlog's
    context-vars for the same span, and the correlation id is echoed back in
    ``header_name``.
    """

    def __init__(self, app: "ASGIApp", header_name: str = "X-Correlation-ID") -> None:
        self.app = app
        self._header = header_name.lower().encode("latin-1")

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {
            name.decode("latin-1"): value.decode("latin-1")
            for name, value in scope.get("headers", [])
        }
        ctx = RequestContext.from_headers(headers)
        echoed = (self._header, ctx.correlation_id.encode("latin-1"))

        async def send_with_header(message: "Message") -> None:
            if message["type"] == "http.response.start":
                message = {**message, "headers": [*message.get("headers", []), echoed]}
            await send(message)

        with CorrelationContext.scope(ctx), structlog.contextvars.bound_contextvars(
            method=scope.get("method"), path=scope.get("path")
        ):
            await self.app(scope, receive, send_with_header)


__all__ = ["FastAPICorrelationIdMiddleware"]
