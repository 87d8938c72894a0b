from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db import Base


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Gift(CreatedAtMixin, Base):
    __tablename__ = "gifts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(sa.Float, nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    occasion: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)
    relationship_stage: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    affiliate_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    retailer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    delivery_days: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0", default=0)

    # Denormalized from testimonials; see catalog.aggregation
    success_rate: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", default=0, index=True
    )
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0", default=0)
    is_active: Mapped[bool] = mapped_column(
        sa.Boolean, nullable=False, server_default=sa.true(), default=True, index=True
    )

    testimonials: Mapped[list["Testimonial"]] = relationship(
        back_populates="gift", cascade="all, delete-orphan", passive_deletes=True
    )


class Testimonial(CreatedAtMixin, Base):
    __tablename__ = "testimonials"
    __table_args__ = (
        CheckConstraint("partner_rating >= 1 AND partner_rating <= 5", name="partner_rating_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gift_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("gifts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reviewer_name: Mapped[str] = mapped_column(Text, nullable=False)
    relationship_length: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    partner_rating: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    testimonial_text: Mapped[str] = mapped_column(Text, nullable=False)
    occasion: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    helpful_votes: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0", default=0)

    gift: Mapped[Gift] = relationship(back_populates="testimonials")


class AnalyticsEvent(CreatedAtMixin, Base):
    __tablename__ = "analytics"
    __table_args__ = (sa.Index("ix_analytics_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    gift_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("gifts.id", ondelete="CASCADE"), nullable=True
    )
    session_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    # "metadata" is reserved on declarative classes
    event_metadata: Mapped[Optional[dict]] = mapped_column("metadata", sa.JSON, nullable=True)
