from __future__ import annotations

from types import SimpleNamespace

import pytest

from catalog.aggregation import (
    SuccessRateStrategy,
    SuccessStats,
    aggregate_by_gift,
    compute_success_stats,
    success_percent,
    with_stats,
)
from catalog.models import GiftRecord


@pytest.mark.parametrize(
    "ratings,expected",
    [
        ([5, 5, 4, 5], 100),
        ([5, 4, 3], 67),
        ([5, 2], 50),
        ([1, 2, 3], 0),
        ([4, 1, 1, 1, 1, 1, 1, 1], 13),
    ],
)
def test_success_rate_rounds_to_whole_percent(ratings, expected):
    stats = compute_success_stats(ratings)
    assert stats == SuccessStats(success_rate=expected, total_reviews=len(ratings))


def test_no_ratings_means_no_stats():
    assert compute_success_stats([]) is None


def test_success_percent_requires_reviews():
    with pytest.raises(ValueError):
        success_percent(0, 0)


def test_aggregate_by_gift_groups_ratings():
    testimonials = [
        SimpleNamespace(gift_id=1, partner_rating=5),
        SimpleNamespace(gift_id=1, partner_rating=3),
        SimpleNamespace(gift_id=2, partner_rating=4),
    ]
    assert aggregate_by_gift(testimonials) == {
        1: SuccessStats(success_rate=50, total_reviews=2),
        2: SuccessStats(success_rate=100, total_reviews=1),
    }


def test_with_stats_keeps_gift_without_testimonials():
    gift = GiftRecord(id=1, title="Mug", price=10.0, category="home", success_rate=88, total_reviews=9)
    assert with_stats(gift, None) is gift

    updated = with_stats(gift, SuccessStats(success_rate=50, total_reviews=2))
    assert (updated.success_rate, updated.total_reviews) == (50, 2)
    assert gift.success_rate == 88


def test_strategy_from_setting():
    assert SuccessRateStrategy.from_setting("ON_READ") is SuccessRateStrategy.ON_READ
    assert SuccessRateStrategy.from_setting("nightly") is SuccessRateStrategy.PRECOMPUTED
    assert SuccessRateStrategy.from_setting(None) is SuccessRateStrategy.PRECOMPUTED
