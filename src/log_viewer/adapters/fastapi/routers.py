"""FastAPI adapter – logs search router and health router."""
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from log_viewer.adapters.fastapi.deps import (
    FastAPIGatewayDep,
    FastAPISearchFilterDep,
    FastAPISettingsDep,
    error_responses,
)
from log_viewer.observability.logging import get_logger

_log = get_logger(__name__)

ReadinessCheck = Callable[[FastAPI], Awaitable[bool]]


def FastAPILogsRouter(path: str = "/api/v1/logs", tags: list[str] | None = None) -> APIRouter:
    """Return the router exposing ``GET {path}``.

    The handler reads the :class:`SearchGateway` and settings from
    ``app.state`` and returns hits as a JSON array in the UI wire shape
    (``_id``, ``_source``, ``sort``, ``highlight``).
    """
    router = APIRouter(tags=tags or ["logs"])

    @router.get(
        path,
        openapi_extra={"responses": error_responses(400, 502, 503, 504)},
    )
    async def search_logs(
        search_filter: FastAPISearchFilterDep,
        gateway: FastAPIGatewayDep,
        settings: FastAPISettingsDep,
    ) -> list[dict[str, Any]]:
        """Search the configured index pattern and return normalized hits."""
        _log.debug("getting_logs", filter=search_filter)
        hits = await gateway.fetch(settings.index_pattern, search_filter)
        return [hit.to_dict() for hit in hits]

    return router


def FastAPIHealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Parameters
    ----------
    path:
        Base path prefix.  Liveness is at ``{path}/live``, readiness at
        ``{path}/ready``.
    readiness_checks:
        Async callables taking the app and returning ``bool``.  All checks
        must return ``True`` for the readiness endpoint to return 200;
        otherwise it returns 503.
    tags:
        OpenAPI tags for the generated routes.
    """
    router = APIRouter(tags=tags or ["ops"])
    checks = readiness_checks or []

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        """Liveness probe – always 200 OK when the process is up."""
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness(request: Request) -> JSONResponse:
        """Readiness probe – runs all registered readiness checks."""
        results: dict[str, bool] = {}
        for check in checks:
            name = getattr(check, "__name__", repr(check))
            results[name] = await check(request.app)

        all_ok = all(results.values())
        if not all_ok:
            _log.warning("readiness_failed", checks=results)
        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["FastAPIHealthRouter", "FastAPILogsRouter", "ReadinessCheck"]
