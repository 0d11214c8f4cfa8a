"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                (domain.py)
    │   ├── ValidationError
    │   └── MalformedDocumentError
    └── InfrastructureError        (infrastructure.py)
        ├── BackendUnavailableError
        ├── BackendTimeoutError
        ├── BackendProtocolError
        └── ExternalServiceError
"""

from log_viewer.kernel.errors.base import BaseError
from log_viewer.kernel.errors.domain import (
    DomainError,
    MalformedDocumentError,
    ValidationError,
)
from log_viewer.kernel.errors.infrastructure import (
    BackendProtocolError,
    BackendTimeoutError,
    BackendUnavailableError,
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "BackendProtocolError",
    "BackendTimeoutError",
    "BackendUnavailableError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "MalformedDocumentError",
    "ValidationError",
]
