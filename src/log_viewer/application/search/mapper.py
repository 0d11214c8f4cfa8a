"""Application search – RawHit → Hit normalization."""
from __future__ import annotations

from typing import Sequence

from log_viewer.application.search.fields import sanitize_keys
from log_viewer.application.search.hit import Hit, RawHit
from log_viewer.kernel.errors import MalformedDocumentError

__all__ = ["map_hit", "map_hits"]


def map_hit(raw: RawHit) -> Hit:
    """Normalize one hit; ``id``, ``sort`` and ``highlight`` pass through verbatim."""
    try:
        source = sanitize_keys(raw.source)
    except MalformedDocumentError as exc:
        raise MalformedDocumentError(
            f"Hit '{raw.id}' has a non-object _source ({exc.kind})",
            kind=exc.kind,
            detail={"hit_id": raw.id, "kind": exc.kind},
            cause=exc,
        ) from exc
    return Hit(id=raw.id, source=source, sort_keys=raw.sort, highlight=raw.highlight)


def map_hits(raw_hits: Sequence[RawHit]) -> list[Hit]:
    """Normalize a page of hits, keeping the engine's order.

    Fails on the first malformed source; no partial page is returned.
    """
    return [map_hit(raw) for raw in raw_hits]
