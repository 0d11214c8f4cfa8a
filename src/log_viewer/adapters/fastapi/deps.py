"""FastAPI adapter – reusable dependency functions.

* ``search_filter_dep`` / ``FastAPISearchFilterDep`` – query string → SearchFilter
* ``get_gateway`` / ``get_settings`` – objects wired onto ``app.state``
* ``error_responses`` – openapi_extra helper
"""
import json
from datetime import date
from typing import Annotated, Any

from fastapi import Depends, Query, Request

from log_viewer.application.search import SearchFilter, SearchGateway, SortOrder
from log_viewer.config import LogViewerSettings
from log_viewer.kernel.errors import ValidationError


# ---------------------------------------------------------------------------
# Search filter dependency
# ---------------------------------------------------------------------------

def parse_search_after(raw: str | None) -> tuple[Any, ...] | None:
    """Decode the ``searchAfter`` parameter (a non-empty JSON array) into a cursor."""
    if raw is None or not raw.strip():
        return None
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise ValidationError(
            "searchAfter must be a JSON array",
            errors=[{"field": "searchAfter", "value": raw}],
            cause=exc,
        ) from exc
    if not isinstance(value, list) or not value:
        raise ValidationError(
            "searchAfter must be a non-empty JSON array",
            errors=[{"field": "searchAfter", "value": raw}],
        )
    return tuple(value)


async def search_filter_dep(
    size: int = Query(ge=1, description="Maximum number of hits to return"),
    query: str | None = Query(default=None, description="Free-text query (simple query string syntax)"),
    start_date: date | None = Query(default=None, alias="startDate", description="Inclusive lower bound"),
    end_date: date | None = Query(default=None, alias="endDate", description="Inclusive upper bound"),
    order: str = Query(default="desc", description="Sort order on @timestamp: asc or desc"),
    search_after: str | None = Query(
        default=None,
        alias="searchAfter",
        description="JSON array of sort values from the last hit of the previous page",
    ),
) -> SearchFilter:
    """Extract and validate search parameters from the query string."""
    return SearchFilter(
        size=size,
        query=query,
        start_date=start_date,
        end_date=end_date,
        search_after=parse_search_after(search_after),
        order=SortOrder.parse(order),
    )


FastAPISearchFilterDep = Annotated[SearchFilter, Depends(search_filter_dep)]


# ---------------------------------------------------------------------------
# app.state accessors
# ---------------------------------------------------------------------------

def get_gateway(request: Request) -> SearchGateway:
    return request.app.state.gateway


def get_settings(request: Request) -> LogViewerSettings:
    return request.app.state.settings


FastAPIGatewayDep = Annotated[SearchGateway, Depends(get_gateway)]
FastAPISettingsDep = Annotated[LogViewerSettings, Depends(get_settings)]


# ---------------------------------------------------------------------------
# OpenAPI extra helpers
# ---------------------------------------------------------------------------

_ERROR_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "code": {"type": "string"},
        "message": {"type": "string"},
        "detail": {"type": "object"},
        "correlation_id": {"type": "string", "nullable": True},
    },
    "required": ["code", "message"],
}

_DEFAULT_STATUS_DESCRIPTIONS: dict[int, str] = {
    400: "Invalid search parameters",
    502: "Search backend returned an unexpected document",
    503: "Search backend unavailable",
    504: "Search backend timed out",
}

_STATUS_CODES: dict[int, str] = {
    400: "validation_error",
    502: "backend_protocol_error",
    503: "backend_unavailable",
    504: "backend_timeout",
}


def error_responses(*codes: int) -> dict[str, dict[str, object]]:
    """Build an ``openapi_extra[\"responses\"]`` dict for the given HTTP codes.

    Usage::

        @router.get("/logs", openapi_extra={"responses": error_responses(400, 503)})
        async def search_logs(...): ...
    """
    result: dict[str, dict[str, object]] = {}
    for code in codes:
        description = _DEFAULT_STATUS_DESCRIPTIONS.get(code, "Error")
        result[str(code)] = {
            "description": description,
            "content": {
                "application/json": {
                    "schema": _ERROR_SCHEMA,
                    "example": {
                        "code": _STATUS_CODES.get(code, "error"),
                        "message": description,
                        "detail": {},
                        "correlation_id": "00000000-0000-0000-0000-000000000000",
                    },
                }
            },
        }
    return result


__all__ = [
    "FastAPIGatewayDep",
    "FastAPISearchFilterDep",
    "FastAPISettingsDep",
    "error_responses",
    "get_gateway",
    "get_settings",
    "parse_search_after",
    "search_filter_dep",
]
