"""Application search – RawHit and normalized Hit."""
from __future__ import annotations

from dataclasses import dataclass

from log_viewer.kernel.types import JsonObject, JsonValue

__all__ = ["Hit", "RawHit"]


@dataclass(frozen=True)
class RawHit:
    """A hit as returned by the engine; ``source`` is not yet shape-checked."""
    id: str
    source: JsonValue
    sort: tuple[JsonValue, ...] | None = None
    highlight: JsonObject | None = None


@dataclass(frozen=True)
class Hit:
    """A normalized hit.

    ``sort_keys`` is what a caller echoes back as the next page's cursor.
    """
    id: str
    source: JsonObject
    sort_keys: tuple[JsonValue, ...] | None = None
    highlight: JsonObject | None = None

    def to_dict(self) -> JsonObject:
        """Render the wire shape consumed by the log-viewer UI."""
        return {
            "_id": self.id,
            "_source": self.source,
            "sort": list(self.sort_keys) if self.sort_keys is not None else None,
            "highlight": self.highlight,
        }
