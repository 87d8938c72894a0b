from __future__ import annotations

import pytest

from catalog.sorting import SortKey
from catalog.validation import (
    QueryLimits,
    QueryValidationError,
    parse_float,
    parse_gift_query,
    parse_int,
    sanitize_string,
    validate_category,
    validate_record_id,
)

CATEGORIES = ("jewelry", "tech", "home", "experiences")


@pytest.fixture
def limits() -> QueryLimits:
    return QueryLimits(categories=CATEGORIES)


def test_sanitize_string_strips_angle_brackets_and_trims():
    assert sanitize_string("  <b>hello</b>  ") == "bhello/b"


def test_sanitize_string_caps_length():
    assert sanitize_string("x" * 300) == "x" * 200
    assert sanitize_string("abcdef", max_length=3) == "abc"


def test_sanitize_string_non_string_is_empty():
    assert sanitize_string(None) == ""
    assert sanitize_string(42) == ""


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("12.5", 12.5),
        ("-5", 0),
        ("250000", 100000),
        ("abc", None),
        ("nan", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_float(raw, expected):
    assert parse_float(raw, 0, 100000) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("10", 10),
        ("12.9", 12),
        ("0", 1),
        ("500", 100),
        ("ten", None),
    ],
)
def test_parse_int_clamps(raw, expected):
    assert parse_int(raw, 1, 100) == expected


def test_validate_category_uses_allow_list():
    assert validate_category("JEWELRY", CATEGORIES) == "jewelry"
    assert validate_category("weapons", CATEGORIES) is None
    assert validate_category("", CATEGORIES) is None


@pytest.mark.parametrize("raw", ["0", "-1", "1e3", "abc", "", None, "1.5"])
def test_validate_record_id_rejects_malformed(raw):
    assert validate_record_id(raw) is None


def test_validate_record_id_accepts_positive_integers():
    assert validate_record_id("12") == 12
    assert validate_record_id(7) == 7


def test_parse_gift_query_defaults(limits):
    query = parse_gift_query({}, limits)
    assert query.filters.applied() == {}
    assert query.sort_by is SortKey.SUCCESS_RATE
    assert query.page.limit == 20
    assert query.page.offset == 0


def test_parse_gift_query_drops_invalid_values(limits):
    query = parse_gift_query(
        {"category": "weapons", "minPrice": "cheap", "limit": "lots", "sortBy": "rating"},
        limits,
    )
    assert query.filters.category is None
    assert query.filters.min_price is None
    assert query.page.limit == 20
    assert query.sort_by is SortKey.SUCCESS_RATE


def test_parse_gift_query_clamps_ranges(limits):
    query = parse_gift_query(
        {"limit": "0", "offset": "20000", "maxPrice": "999999", "minSuccessRate": "150"},
        limits,
    )
    assert query.page.limit == 1
    assert query.page.offset == 10000
    assert query.filters.max_price == 100000
    assert query.filters.min_success_rate == 100


def test_parse_gift_query_page_converts_to_offset(limits):
    query = parse_gift_query({"limit": "10", "page": "3"}, limits)
    assert query.page.offset == 20
    assert query.page.page == 3


def test_parse_gift_query_offset_wins_over_page(limits):
    query = parse_gift_query({"limit": "10", "page": "3", "offset": "5"}, limits)
    assert query.page.offset == 5


def test_parse_gift_query_echoes_applied_filters(limits):
    query = parse_gift_query(
        {"category": "jewelry", "maxPrice": "200", "search": " <necklace> ", "relationshipStage": "dating"},
        limits,
    )
    assert query.echo() == {
        "category": "jewelry",
        "maxPrice": 200.0,
        "relationshipStage": "dating",
        "search": "necklace",
    }


@pytest.mark.parametrize(
    "params,field",
    [
        ({"minPrice": "abc"}, "minPrice"),
        ({"limit": "many"}, "limit"),
        ({"sortBy": "rating"}, "sortBy"),
        ({"category": "weapons"}, "category"),
    ],
)
def test_parse_gift_query_strict_mode_rejects(limits, params, field):
    with pytest.raises(QueryValidationError) as excinfo:
        parse_gift_query(params, limits, strict=True)
    assert excinfo.value.field == field


def test_parse_gift_query_strict_mode_still_clamps(limits):
    query = parse_gift_query({"limit": "1000"}, limits, strict=True)
    assert query.page.limit == 100
