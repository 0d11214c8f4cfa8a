"""Domain errors – bad caller input and data-shape violations."""

from __future__ import annotations

from typing import Any

from log_viewer.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a data-shape assumption or input rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        base = super().to_dict(include_cause=include_cause)
        base["errors"] = self.errors
        return base


class MalformedDocumentError(DomainError):
    """A document expected to be a JSON object is some other kind of node."""

    default_code = "malformed_document"

    def __init__(
        self,
        message: str = "Document is not a JSON object",
        *,
        kind: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.kind = kind


__all__ = [
    "DomainError",
    "MalformedDocumentError",
    "ValidationError",
]
