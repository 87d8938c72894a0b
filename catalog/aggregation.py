"""
Success-rate aggregation.

A gift's success rate is the share of its testimonials whose partner rating
is at least 4, as a whole percentage rounded half up. Gifts without
testimonials keep their stored values, so the precomputed and on-read
strategies agree for any testimonial set.
"""
from __future__ import annotations

import dataclasses
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

SUCCESS_RATING_THRESHOLD = 4


class SuccessRateStrategy(str, Enum):
    PRECOMPUTED = "precomputed"
    ON_READ = "on_read"

    @classmethod
    def from_setting(cls, value: Optional[str]) -> "SuccessRateStrategy":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.PRECOMPUTED


@dataclass(frozen=True)
class SuccessStats:
    success_rate: int
    total_reviews: int


def success_percent(successes: int, total: int) -> int:
    if total <= 0:
        raise ValueError("total must be positive")
    # round(100 * successes / total) with halves rounded up, in integer arithmetic
    return (200 * successes + total) // (2 * total)


def compute_success_stats(ratings: Iterable[int]) -> Optional[SuccessStats]:
    ratings = list(ratings)
    if not ratings:
        return None
    successes = sum(1 for rating in ratings if rating >= SUCCESS_RATING_THRESHOLD)
    return SuccessStats(success_rate=success_percent(successes, len(ratings)), total_reviews=len(ratings))


def aggregate_by_gift(testimonials: Iterable[Any]) -> dict[Any, SuccessStats]:
    ratings: dict[Any, list[int]] = defaultdict(list)
    for testimonial in testimonials:
        ratings[testimonial.gift_id].append(testimonial.partner_rating)
    return {gift_id: compute_success_stats(values) for gift_id, values in ratings.items()}


def with_stats(gift: Any, stats: Optional[SuccessStats]) -> Any:
    """Return a copy of a dataclass gift carrying ``stats``; unchanged when there are none."""
    if stats is None:
        return gift
    return dataclasses.replace(gift, success_rate=stats.success_rate, total_reviews=stats.total_reviews)
