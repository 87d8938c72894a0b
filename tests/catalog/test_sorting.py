from __future__ import annotations

from datetime import datetime, timedelta, timezone

from catalog.models import GiftRecord
from catalog.sorting import DEFAULT_SORT, SortKey, is_known_sort, resolve_sort, sort_gifts

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _gift(gift_id: int, price: float, success_rate: int, total_reviews: int, age_days: int = 0) -> GiftRecord:
    return GiftRecord(
        id=gift_id,
        title=f"Gift {gift_id}",
        price=price,
        category="home",
        success_rate=success_rate,
        total_reviews=total_reviews,
        created_at=BASE - timedelta(days=age_days),
    )


GIFTS = [
    _gift(1, 40.0, 90, 10, age_days=3),
    _gift(2, 120.0, 95, 4, age_days=1),
    _gift(3, 80.0, 90, 25, age_days=2),
    _gift(4, 80.0, 90, 10, age_days=0),
]


def _ids(gifts):
    return [g.id for g in gifts]


def test_success_rate_breaks_ties_on_total_reviews():
    assert _ids(sort_gifts(GIFTS, SortKey.SUCCESS_RATE)) == [2, 3, 1, 4]


def test_price_sorts_are_stable():
    assert _ids(sort_gifts(GIFTS, SortKey.PRICE_LOW)) == [1, 3, 4, 2]
    assert _ids(sort_gifts(GIFTS, SortKey.PRICE_HIGH)) == [2, 3, 4, 1]


def test_newest_and_popular():
    assert _ids(sort_gifts(GIFTS, SortKey.NEWEST)) == [4, 2, 3, 1]
    assert _ids(sort_gifts(GIFTS, SortKey.POPULAR)) == [3, 1, 4, 2]


def test_sort_is_repeatable():
    assert _ids(sort_gifts(GIFTS)) == _ids(sort_gifts(list(GIFTS)))


def test_sort_does_not_mutate_input():
    original = list(GIFTS)
    sort_gifts(GIFTS, SortKey.PRICE_HIGH)
    assert GIFTS == original


def test_unknown_sort_falls_back_to_default():
    assert resolve_sort("rating") is DEFAULT_SORT
    assert resolve_sort(None) is DEFAULT_SORT
    assert resolve_sort(" price_low ") is SortKey.PRICE_LOW
    assert is_known_sort("newest")
    assert not is_known_sort(3)
