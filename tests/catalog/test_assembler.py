from __future__ import annotations

import time

from catalog.assembler import assemble_error, assemble_gift_list, processing_time_ms, utc_timestamp
from catalog.pagination import PageRequest, build_pagination


def test_gift_list_payload_shape():
    pagination = build_pagination(1, 1, PageRequest(limit=20, offset=0))
    payload = assemble_gift_list([{"id": 1}], pagination, {"category": "tech"}, "price_low", time.perf_counter())

    assert set(payload) == {"gifts", "pagination", "filters", "sort_by", "processing_time_ms", "timestamp"}
    assert payload["gifts"] == [{"id": 1}]
    assert payload["pagination"]["total"] == 1
    assert payload["filters"] == {"category": "tech"}
    assert payload["sort_by"] == "price_low"
    assert payload["processing_time_ms"] >= 0


def test_error_payload_drops_unset_extras():
    payload = assemble_error("not_found", "Gift not found", None, retry=None, fields={"id": "bad"})
    assert payload["error"] == "not_found"
    assert payload["message"] == "Gift not found"
    assert payload["processing_time_ms"] == 0.0
    assert payload["fields"] == {"id": "bad"}
    assert "retry" not in payload


def test_timestamp_is_utc_iso8601():
    stamp = utc_timestamp()
    assert stamp.endswith("Z")
    assert "T" in stamp


def test_processing_time_is_non_negative():
    assert processing_time_ms(time.perf_counter()) >= 0
    assert processing_time_ms(None) == 0.0
