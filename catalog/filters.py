from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Optional

Predicate = Callable[[Any], bool]

# Filter attribute -> query-string name used when echoing applied filters
_ECHO_NAMES = {
    "category": "category",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "occasion": "occasion",
    "relationship_stage": "relationshipStage",
    "min_success_rate": "minSuccessRate",
    "search": "search",
    "max_delivery_days": "maxDeliveryDays",
    "exclude_id": "excludeId",
}


@dataclass(frozen=True)
class GiftFilters:
    """Validated catalog filters. ``None`` means the filter is not applied."""

    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    occasion: Optional[str] = None
    relationship_stage: Optional[str] = None
    min_success_rate: Optional[int] = None
    search: Optional[str] = None
    max_delivery_days: Optional[int] = None
    exclude_id: Optional[int] = None

    def applied(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def echo(self) -> dict[str, Any]:
        return {_ECHO_NAMES[name]: value for name, value in self.applied().items()}


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def search_matches(gift: Any, term: str) -> bool:
    needle = term.lower()
    return (
        _contains(gift.title, needle)
        or _contains(gift.description, needle)
        or _contains(gift.category, needle)
    )


def build_predicates(filters: GiftFilters) -> list[Predicate]:
    predicates: list[Predicate] = [lambda g: bool(g.is_active)]

    if filters.category is not None:
        predicates.append(lambda g: g.category == filters.category)
    if filters.min_price is not None:
        predicates.append(lambda g: g.price is not None and g.price >= filters.min_price)
    if filters.max_price is not None:
        predicates.append(lambda g: g.price is not None and g.price <= filters.max_price)
    if filters.occasion is not None:
        predicates.append(lambda g: g.occasion == filters.occasion)
    if filters.relationship_stage is not None:
        predicates.append(lambda g: g.relationship_stage == filters.relationship_stage)
    if filters.min_success_rate is not None:
        predicates.append(lambda g: (g.success_rate or 0) >= filters.min_success_rate)
    if filters.search:
        predicates.append(lambda g: search_matches(g, filters.search))
    if filters.max_delivery_days is not None:
        predicates.append(lambda g: (g.delivery_days or 0) <= filters.max_delivery_days)
    if filters.exclude_id is not None:
        predicates.append(lambda g: g.id != filters.exclude_id)

    return predicates


def build_predicate(filters: GiftFilters) -> Predicate:
    predicates = build_predicates(filters)

    def predicate(gift: Any) -> bool:
        return all(p(gift) for p in predicates)

    return predicate
