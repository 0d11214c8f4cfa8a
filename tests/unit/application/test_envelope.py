"""Unit tests for parsing the engine response envelope."""

from __future__ import annotations

import pytest

from log_viewer.application.search import RawHit, parse_envelope
from log_viewer.kernel.errors import BackendProtocolError


def _envelope(*hits: object) -> dict:
    return {"took": 3, "timed_out": False, "hits": {"total": {"value": len(hits)}, "hits": list(hits)}}


class TestParseEnvelope:
    def test_full_hit(self) -> None:
        payload = _envelope(
            {
                "_index": "filebeat-2024.01.01",
                "_id": "abc",
                "_source": {"user.id": "u1"},
                "sort": [5],
                "highlight": {"message": ["<span class='highlight'>x</span>"]},
            }
        )
        assert parse_envelope(payload) == [
            RawHit(
                id="abc",
                source={"user.id": "u1"},
                sort=(5,),
                highlight={"message": ["<span class='highlight'>x</span>"]},
            )
        ]

    def test_optional_members_default_to_none(self) -> None:
        [raw] = parse_envelope(_envelope({"_id": "a", "_source": {}}))
        assert raw.sort is None
        assert raw.highlight is None

    def test_order_preserved(self) -> None:
        payload = _envelope(*({"_id": str(i), "_source": {}} for i in range(5)))
        assert [raw.id for raw in parse_envelope(payload)] == ["0", "1", "2", "3", "4"]

    def test_empty_page(self) -> None:
        assert parse_envelope(_envelope()) == []

    def test_scalar_source_left_for_mapper(self) -> None:
        [raw] = parse_envelope(_envelope({"_id": "a", "_source": "text"}))
        assert raw.source == "text"


class TestParseEnvelopeErrors:
    @pytest.mark.parametrize(
        ("payload", "path"),
        [
            ([], "$"),
            ({}, "$"),
            ({"hits": []}, "$.hits"),
            ({"hits": {}}, "$.hits"),
            ({"hits": {"hits": {}}}, "$.hits.hits"),
            ({"hits": {"hits": ["x"]}}, "$.hits.hits[0]"),
        ],
    )
    def test_bad_shape(self, payload: object, path: str) -> None:
        with pytest.raises(BackendProtocolError) as exc_info:
            parse_envelope(payload)  # type: ignore[arg-type]
        assert exc_info.value.path == path

    def test_missing_id(self) -> None:
        with pytest.raises(BackendProtocolError) as exc_info:
            parse_envelope(_envelope({"_source": {}}))
        assert exc_info.value.path == "$.hits.hits[0]._id"

    def test_missing_source(self) -> None:
        with pytest.raises(BackendProtocolError) as exc_info:
            parse_envelope(_envelope({"_id": "a", "_source": {}}, {"_id": "b"}))
        assert exc_info.value.path == "$.hits.hits[1]._source"

    def test_sort_must_be_array(self) -> None:
        with pytest.raises(BackendProtocolError) as exc_info:
            parse_envelope(_envelope({"_id": "a", "_source": {}, "sort": 5}))
        assert exc_info.value.path == "$.hits.hits[0].sort"

    def test_highlight_must_be_object(self) -> None:
        with pytest.raises(BackendProtocolError) as exc_info:
            parse_envelope(_envelope({"_id": "a", "_source": {}, "highlight": ["x"]}))
        assert exc_info.value.path == "$.hits.hits[0].highlight"
