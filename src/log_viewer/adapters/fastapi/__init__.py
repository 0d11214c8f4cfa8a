"""FastAPI adapter – middleware, exception mapper, routers, deps."""
from log_viewer.adapters.fastapi.deps import (
    FastAPIGatewayDep,
    FastAPISearchFilterDep,
    FastAPISettingsDep,
    error_responses,
    search_filter_dep,
)
from log_viewer.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from log_viewer.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from log_viewer.adapters.fastapi.routers import FastAPIHealthRouter, FastAPILogsRouter

__all__ = [
    "FastAPICorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "FastAPIGatewayDep",
    "FastAPIHealthRouter",
    "FastAPILogsRouter",
    "FastAPISearchFilterDep",
    "FastAPISettingsDep",
    "error_responses",
    "search_filter_dep",
]
