"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from log_viewer.kernel.errors import (
    BackendTimeoutError,
    BackendUnavailableError,
    ExternalServiceError,
)
from log_viewer.observability.correlation import CorrelationContext

DEFAULT_TIMEOUT = 10.0


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    ``X-Correlation-ID`` is taken from :class:`CorrelationContext` unless the
    caller passes the header explicitly.
    """

    def __init__(self, base_url: str = "", timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self._base_url = base_url
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        kwargs["headers"] = _with_correlation(kwargs.get("headers"))
        target = f"{method} {self._base_url}{url}"
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(
                resource=self._base_url or url,
                message=f"HTTP request timed out: {target}",
                cause=exc,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=self._base_url or url,
                message=f"HTTP {exc.response.status_code} from {target}",
                status_code=exc.response.status_code,
                detail={"body": exc.response.text[:512]},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(
                resource=self._base_url or url,
                message=f"HTTP transport failure on {target}: {exc}",
                cause=exc,
            ) from exc


def _with_correlation(headers: dict[str, str] | None) -> dict[str, str]:
    merged = dict(headers or {})
    ctx = CorrelationContext.get()
    if ctx is not None and not any(k.lower() == "x-correlation-id" for k in merged):
        merged["X-Correlation-ID"] = ctx.correlation_id
    return merged


__all__ = ["DEFAULT_TIMEOUT", "HttpxHttpClient"]
