from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GiftRecord:
    id: int
    title: str
    price: float
    category: str
    description: Optional[str] = None
    occasion: Optional[str] = None
    relationship_stage: Optional[str] = None
    image_url: Optional[str] = None
    affiliate_url: Optional[str] = None
    retailer: Optional[str] = None
    delivery_days: int = 0
    success_rate: int = 0
    total_reviews: int = 0
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GiftRecord":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


@dataclass
class TestimonialRecord:
    id: int
    gift_id: int
    reviewer_name: str
    partner_rating: int
    testimonial_text: str
    relationship_length: Optional[str] = None
    occasion: Optional[str] = None
    helpful_votes: int = 0
    created_at: datetime = field(default_factory=_utcnow)

    __test__ = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TestimonialRecord":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


@dataclass(frozen=True)
class CategorySummary:
    category: str
    count: int
    min_price: float
    max_price: float
    avg_success_rate: int
