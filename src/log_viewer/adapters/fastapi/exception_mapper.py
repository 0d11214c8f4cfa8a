"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from log_viewer.kernel.errors import (
    BackendProtocolError,
    BackendTimeoutError,
    BackendUnavailableError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    MalformedDocumentError,
    ValidationError,
)
from log_viewer.observability.correlation import CorrelationContext
from log_viewer.observability.logging import get_logger

_log = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "backend_unavailable", "message": "...", "detail": {...},
         "correlation_id": "..."}

    Mappings
    --------
    ``ValidationError``          → 400
    ``MalformedDocumentError``   → 502
    ``BackendProtocolError``     → 502
    ``ExternalServiceError``     → 502
    ``BackendTimeoutError``      → 504
    ``BackendUnavailableError``  → 503
    ``InfrastructureError``      → 503
    ``DomainError``              → 422
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[BaseError], int]] = [
            (ValidationError, 400),
            (MalformedDocumentError, 502),
            (BackendProtocolError, 502),
            (ExternalServiceError, 502),
            (BackendTimeoutError, 504),
            (BackendUnavailableError, 503),
            (InfrastructureError, 503),
            (DomainError, 422),
        ]

    def status_for(self, exc: BaseException) -> int:
        """Return the status the first matching mapping assigns to *exc*."""
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: FastAPI) -> None:
        """Register all error handlers on a ``FastAPI`` app."""
        for exc_type, _ in self._map:
            app.add_exception_handler(exc_type, self._make_handler())

    def _make_handler(self) -> Callable[[Request, Any], Awaitable[JSONResponse]]:
        async def handler(request: Request, exc: Any) -> JSONResponse:
            status = self.status_for(exc)
            ctx = CorrelationContext.get()
            body = (
                exc.to_dict(include_cause=False)
                if isinstance(exc, BaseError)
                else {"code": "error", "message": str(exc)}
            )
            body["correlation_id"] = ctx.correlation_id if ctx is not None else None

            log = _log.warning if status >= 500 else _log.info
            log(
                "request_failed",
                path=request.url.path,
                status=status,
                error=body["code"],
                message=body["message"],
            )
            return JSONResponse(status_code=status, content=body)

        return handler


__all__ = ["FastAPIExceptionMapper"]
