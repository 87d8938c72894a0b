from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional


class SortKey(str, Enum):
    SUCCESS_RATE = "success_rate"
    PRICE_LOW = "price_low"
    PRICE_HIGH = "price_high"
    NEWEST = "newest"
    POPULAR = "popular"


DEFAULT_SORT = SortKey.SUCCESS_RATE


@dataclass(frozen=True)
class SortField:
    attribute: str
    descending: bool


SORT_STRATEGIES: dict[SortKey, tuple[SortField, ...]] = {
    SortKey.SUCCESS_RATE: (SortField("success_rate", True), SortField("total_reviews", True)),
    SortKey.PRICE_LOW: (SortField("price", False),),
    SortKey.PRICE_HIGH: (SortField("price", True),),
    SortKey.NEWEST: (SortField("created_at", True),),
    SortKey.POPULAR: (SortField("total_reviews", True),),
}


def is_known_sort(sort_by: Any) -> bool:
    return isinstance(sort_by, str) and sort_by.strip() in SortKey._value2member_map_


def resolve_sort(sort_by: Optional[str]) -> SortKey:
    if is_known_sort(sort_by):
        return SortKey(sort_by.strip())
    return DEFAULT_SORT


def sort_fields(key: SortKey) -> tuple[SortField, ...]:
    return SORT_STRATEGIES[key]


def _key_for(attribute: str):
    # Missing values order below any present value without comparing across types
    def key(item: Any) -> tuple[bool, Any]:
        value = getattr(item, attribute, None)
        if value is None:
            return (False, 0)
        return (True, value)

    return key


def sort_gifts(gifts: Iterable[Any], key: SortKey = DEFAULT_SORT) -> list[Any]:
    """Stable sort: items with equal keys keep their input order.

    Applies one stable pass per field, least significant first.
    """
    ordered = list(gifts)
    for sort_field in reversed(sort_fields(key)):
        ordered = sorted(ordered, key=_key_for(sort_field.attribute), reverse=sort_field.descending)
    return ordered
