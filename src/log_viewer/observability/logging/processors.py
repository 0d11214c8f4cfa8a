"""Observability – structlog processor and logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from log_viewer.observability.correlation import CorrelationContext


class CorrelationProcessor:
    """Copy the ids of the current request onto each event.

    ``correlation_id`` is added whenever a request is in flight, ``trace_id``
    only when the caller sent a ``traceparent``. Keys the event already has
    are kept.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        ctx = CorrelationContext.get()
        if ctx is None:
            return event_dict
        event_dict.setdefault("correlation_id", ctx.correlation_id)
        if ctx.trace_id is not None:
            event_dict.setdefault("trace_id", ctx.trace_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger for *name* with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["CorrelationProcessor", "get_logger"]
