from __future__ import annotations

from typing import Any, Iterable, Optional

from .filters import GiftFilters
from .validation import QueryLimits, parse_float, validate_category

QUICK_RECOMMEND_LIMIT = 5
SURVEY_RESULT_LIMIT = 10

BUDGET_RANGES: dict[str, tuple[float, float]] = {
    "low": (0, 50),
    "medium": (50, 150),
    "high": (150, 500),
    "luxury": (500, 10000),
}
DEFAULT_BUDGET_RANGE = (0, 10000)

URGENCY_DELIVERY_DAYS: dict[str, int] = {
    "today": 0,
    "week": 7,
    "month": 30,
}
DEFAULT_DELIVERY_DAYS = 30


def quick_recommend_filters(
    budget: Optional[str] = None,
    occasion: Optional[str] = None,
    urgency: Optional[str] = None,
) -> GiftFilters:
    min_price, max_price = BUDGET_RANGES.get((budget or "").lower(), DEFAULT_BUDGET_RANGE)
    max_days = URGENCY_DELIVERY_DAYS.get((urgency or "").lower(), DEFAULT_DELIVERY_DAYS)
    return GiftFilters(
        min_price=min_price,
        max_price=max_price,
        occasion=occasion if occasion and occasion != "any" else None,
        max_delivery_days=max_days,
    )


def survey_questions(categories: Iterable[str]) -> list[dict[str, Any]]:
    return [
        {
            "id": "category",
            "question": "Preferred gift category?",
            "type": "choice",
            "options": list(categories),
        },
        {"id": "budgetMin", "question": "Minimum budget", "type": "number"},
        {"id": "budgetMax", "question": "Maximum budget", "type": "number"},
    ]


def survey_filters(
    limits: QueryLimits,
    category: Optional[str] = None,
    budget_min: Any = None,
    budget_max: Any = None,
) -> GiftFilters:
    """Unknown categories and unusable budgets are dropped, as for the list endpoint."""
    return GiftFilters(
        category=validate_category(category, limits.categories),
        min_price=parse_float(budget_min, 0, limits.max_price),
        max_price=parse_float(budget_max, 0, limits.max_price),
    )
