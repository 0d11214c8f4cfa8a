"""Unit tests for RawHit → Hit normalization."""

from __future__ import annotations

import pytest

from log_viewer.application.search import Hit, RawHit, map_hit, map_hits
from log_viewer.kernel.errors import MalformedDocumentError


class TestMapHit:
    def test_source_sanitized_rest_verbatim(self) -> None:
        raw = RawHit(id="abc", source={"user.id": "u1"}, sort=(5,))
        hit = map_hit(raw)
        assert hit == Hit(id="abc", source={"userId": "u1"}, sort_keys=(5,), highlight=None)

    def test_highlight_keys_not_sanitized(self) -> None:
        raw = RawHit(id="a", source={}, highlight={"error.message": ["x"]})
        assert map_hit(raw).highlight == {"error.message": ["x"]}

    def test_to_dict_wire_shape(self) -> None:
        hit = map_hit(RawHit(id="abc", source={"user.id": "u1"}, sort=(5,)))
        assert hit.to_dict() == {"_id": "abc", "_source": {"userId": "u1"}, "sort": [5], "highlight": None}

    def test_to_dict_without_sort(self) -> None:
        assert map_hit(RawHit(id="a", source={})).to_dict()["sort"] is None

    @pytest.mark.parametrize(("source", "kind"), [("text", "string"), (7, "number"), ([], "array"), (None, "null")])
    def test_non_object_source(self, source: object, kind: str) -> None:
        with pytest.raises(MalformedDocumentError) as exc_info:
            map_hit(RawHit(id="bad", source=source))  # type: ignore[arg-type]
        err = exc_info.value
        assert err.kind == kind
        assert err.detail == {"hit_id": "bad", "kind": kind}
        assert isinstance(err.__cause__, MalformedDocumentError)


class TestMapHits:
    def test_order_and_count_preserved(self) -> None:
        raws = [RawHit(id=str(i), source={"n": i}, sort=(i,)) for i in (3, 1, 2)]
        hits = map_hits(raws)
        assert [h.id for h in hits] == ["3", "1", "2"]
        assert [h.sort_keys for h in hits] == [(3,), (1,), (2,)]

    def test_empty(self) -> None:
        assert map_hits([]) == []

    def test_fails_whole_page_on_first_bad_source(self) -> None:
        raws = [RawHit(id="ok", source={}), RawHit(id="bad", source="x"), RawHit(id="bad2", source=1)]
        with pytest.raises(MalformedDocumentError) as exc_info:
            map_hits(raws)
        assert exc_info.value.detail["hit_id"] == "bad"
