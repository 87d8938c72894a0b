from __future__ import annotations

import pytest

from catalog.presets import quick_recommend_filters, survey_filters, survey_questions
from catalog.validation import QueryLimits


@pytest.mark.parametrize(
    "budget,expected",
    [
        ("low", (0, 50)),
        ("medium", (50, 150)),
        ("high", (150, 500)),
        ("luxury", (500, 10000)),
        ("unlimited", (0, 10000)),
        (None, (0, 10000)),
    ],
)
def test_budget_tiers(budget, expected):
    filters = quick_recommend_filters(budget=budget)
    assert (filters.min_price, filters.max_price) == expected


@pytest.mark.parametrize(
    "urgency,expected",
    [("today", 0), ("week", 7), ("month", 30), (None, 30), ("someday", 30)],
)
def test_urgency_caps_delivery_days(urgency, expected):
    assert quick_recommend_filters(urgency=urgency).max_delivery_days == expected


def test_occasion_any_is_not_a_filter():
    assert quick_recommend_filters(occasion="any").occasion is None
    assert quick_recommend_filters(occasion="birthday").occasion == "birthday"


def test_survey_filters_clamp_budget_and_check_category():
    limits = QueryLimits(categories=("jewelry", "tech"), max_price=1000)

    filters = survey_filters(limits, category="Tech", budget_min=-5, budget_max=5000)
    assert filters.category == "tech"
    assert (filters.min_price, filters.max_price) == (0, 1000)

    assert survey_filters(limits, category="weapons").applied() == {}


def test_survey_questions_list_configured_categories():
    questions = survey_questions(["jewelry", "tech"])
    assert questions[0]["options"] == ["jewelry", "tech"]
    assert [q["id"] for q in questions] == ["category", "budgetMin", "budgetMax"]
