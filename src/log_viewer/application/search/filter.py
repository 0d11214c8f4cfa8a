"""Application search – SearchFilter value object."""
from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum
from typing import Sequence

from log_viewer.kernel.errors import ValidationError
from log_viewer.kernel.types import JsonValue

__all__ = ["SearchFilter", "SortOrder"]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, token: str) -> "SortOrder":
        """Parse an ``asc``/``desc`` token (case-insensitive)."""
        try:
            return cls(token.strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid sort order {token!r}: expected 'asc' or 'desc'",
                errors=[{"field": "order", "value": token}],
            ) from exc


@dataclasses.dataclass(frozen=True)
class SearchFilter:
    """Caller-supplied search intent.

    ``search_after`` is the sort-key tuple of the last hit of the previous
    page; a list passed by the caller is frozen into a tuple.
    """

    size: int
    query: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    search_after: tuple[JsonValue, ...] | None = None
    order: SortOrder = SortOrder.DESC

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValidationError(
                "size must be >= 1",
                errors=[{"field": "size", "value": self.size}],
            )
        if self.search_after is not None and not isinstance(self.search_after, tuple):
            object.__setattr__(self, "search_after", _freeze(self.search_after))
        if not isinstance(self.order, SortOrder):
            object.__setattr__(self, "order", SortOrder.parse(str(self.order)))

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    def next_page(self, search_after: Sequence[JsonValue]) -> "SearchFilter":
        """Return a copy of this filter resuming after *search_after*."""
        return dataclasses.replace(self, search_after=tuple(search_after))


def _freeze(values: Sequence[JsonValue]) -> tuple[JsonValue, ...]:
    if isinstance(values, (str, bytes)):
        raise ValidationError(
            "search_after must be an array of sort values",
            errors=[{"field": "searchAfter", "value": values}],
        )
    return tuple(values)
