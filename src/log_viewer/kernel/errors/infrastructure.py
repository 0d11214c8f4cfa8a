"""Infrastructure errors – search backend and transport failures."""

from __future__ import annotations

from typing import Any

from log_viewer.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a data-shape violation."""

    default_code = "infrastructure_error"


class BackendUnavailableError(InfrastructureError):
    """The search backend could not be reached (connect, DNS, reset, …)."""

    default_code = "backend_unavailable"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not reach '{resource}'", **kwargs)
        self.resource = resource


class BackendTimeoutError(InfrastructureError):
    """A request to the search backend exceeded the transport deadline."""

    default_code = "backend_timeout"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Timed out waiting for '{resource}'", **kwargs)
        self.resource = resource


class BackendProtocolError(InfrastructureError):
    """The backend answered with a payload that is not the expected envelope."""

    default_code = "backend_protocol_error"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.path = path


class ExternalServiceError(InfrastructureError):
    """The search backend returned a non-success HTTP status."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "BackendProtocolError",
    "BackendTimeoutError",
    "BackendUnavailableError",
    "ExternalServiceError",
    "InfrastructureError",
]
