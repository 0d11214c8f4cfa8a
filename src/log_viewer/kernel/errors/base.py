"""Root of the log-viewer error hierarchy.

Every error carries a machine-readable ``code`` and a JSON-safe ``detail``
mapping. The HTTP layer renders :meth:`BaseError.to_dict` as the error body,
so nothing placed in ``detail`` may be secret.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Base class for all errors raised by the service.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra JSON-serialisable context.
        cause: Lower-level exception this error wraps; also set as ``__cause__``.
    """

    default_code: ClassVar[str] = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        """Serialise for logs (with ``cause``) or HTTP bodies (without)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if include_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
