from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class GiftSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    price: float
    category: str
    occasion: Optional[str] = None
    relationship_stage: Optional[str] = None
    image_url: Optional[str] = None
    affiliate_url: Optional[str] = None
    retailer: Optional[str] = None
    delivery_days: int = 0
    success_rate: int = 0
    total_reviews: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None


class TestimonialSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    gift_id: int
    reviewer_name: str
    relationship_length: Optional[str] = None
    partner_rating: int
    testimonial_text: str
    occasion: Optional[str] = None
    helpful_votes: int = 0
    created_at: Optional[datetime] = None

    __test__ = False


class CategorySummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    count: int
    min_price: float
    max_price: float
    avg_success_rate: int
    display_name: str
    icon: str


class AnalyticsTrackRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    event_type: str = Field(alias="eventType", min_length=1, max_length=100)
    gift_id: Optional[int] = Field(None, alias="giftId", ge=1)
    session_id: str = Field(alias="sessionId", min_length=1, max_length=100)
    metadata: Optional[dict[str, Any]] = None


class SurveyAnswers(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    category: Optional[str] = Field(None, max_length=50)
    budget_min: Optional[float] = Field(None, alias="budgetMin")
    budget_max: Optional[float] = Field(None, alias="budgetMax")


class AnalyticsTrackResponse(BaseModel):
    success: bool
    id: Optional[int] = None
    session_id: Optional[str] = Field(None, serialization_alias="sessionId")


class HelpfulVoteResponse(BaseModel):
    helpful_votes: int


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    database: str
    version: str


def gift_payload(record: Any) -> dict[str, Any]:
    return GiftSchema.model_validate(record).model_dump(mode="json")


def testimonial_payload(record: Any) -> dict[str, Any]:
    return TestimonialSchema.model_validate(record).model_dump(mode="json")
