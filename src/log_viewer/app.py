"""log-viewer HTTP service – FastAPI application factory."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from log_viewer import __version__
from log_viewer.adapters.elasticsearch import ElasticsearchSearchBackend
from log_viewer.adapters.fastapi import (
    FastAPICorrelationIdMiddleware,
    FastAPIExceptionMapper,
    FastAPIHealthRouter,
    FastAPILogsRouter,
)
from log_viewer.application.search import SearchGateway
from log_viewer.config import LogViewerSettings
from log_viewer.observability.logging import get_logger

_log = get_logger(__name__)


async def search_backend(app: FastAPI) -> bool:
    """Readiness check: the search backend answers a ping."""
    gateway: SearchGateway = app.state.gateway
    return await gateway.backend.ping()


def create_app(settings: LogViewerSettings, gateway: SearchGateway | None = None) -> FastAPI:
    """Build the application.

    Without *gateway* the lifespan opens one shared httpx client to
    ``settings.elastic_url`` and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if gateway is not None:
            yield
            return

        backend = ElasticsearchSearchBackend.from_settings(settings)
        app.state.gateway = SearchGateway(backend)
        _log.info("backend_opened", elastic_url=settings.elastic_url, index=settings.index_pattern)
        try:
            yield
        finally:
            await backend.aclose()
            _log.info("backend_closed")

    app = FastAPI(title="log-viewer", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    if gateway is not None:
        app.state.gateway = gateway
    app.add_middleware(FastAPICorrelationIdMiddleware)
    FastAPIExceptionMapper().register(app)
    app.include_router(FastAPILogsRouter())
    app.include_router(FastAPIHealthRouter(readiness_checks=[search_backend]))
    return app


__all__ = ["create_app", "search_backend"]
