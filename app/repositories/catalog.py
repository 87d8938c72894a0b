from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence

import sqlalchemy as sa
from sqlalchemy import case, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Gift, Testimonial
from catalog.aggregation import (
    SUCCESS_RATING_THRESHOLD,
    SuccessRateStrategy,
    aggregate_by_gift,
    with_stats,
)
from catalog.filters import GiftFilters, build_predicate
from catalog.models import CategorySummary, GiftRecord, TestimonialRecord
from catalog.pagination import PageRequest
from catalog.sorting import DEFAULT_SORT, SortKey, sort_fields, sort_gifts

logger = logging.getLogger(__name__)

TESTIMONIALS_PER_GIFT = 10
SIMILAR_GIFTS_LIMIT = 4


class CatalogStore(ABC):
    """Read side of the gift catalog plus its two narrow write paths."""

    strategy: SuccessRateStrategy

    @abstractmethod
    async def query(
        self,
        filters: GiftFilters,
        sort: SortKey = DEFAULT_SORT,
        page: Optional[PageRequest] = None,
    ) -> list[GiftRecord]:
        pass

    @abstractmethod
    async def count(self, filters: GiftFilters) -> int:
        pass

    @abstractmethod
    async def get_gift(self, gift_id: int) -> Optional[GiftRecord]:
        """Active gift by id, or None."""
        pass

    @abstractmethod
    async def testimonials_for(self, gift_id: int, limit: Optional[int] = None) -> list[Any]:
        pass

    @abstractmethod
    async def increment_helpful(self, testimonial_id: int) -> Optional[int]:
        """Atomically add one helpful vote. Returns the new count, or None if missing."""
        pass

    @abstractmethod
    async def category_summaries(self) -> list[CategorySummary]:
        pass

    @abstractmethod
    async def refresh_success_rates(self) -> int:
        """Recompute stored success rates from testimonials. Returns gifts updated."""
        pass

    async def similar_gifts(self, gift: GiftRecord, limit: int = SIMILAR_GIFTS_LIMIT) -> list[GiftRecord]:
        filters = GiftFilters(category=gift.category, exclude_id=gift.id)
        return await self.query(filters, SortKey.SUCCESS_RATE, PageRequest(limit=limit, offset=0))


def _testimonial_sort_key(testimonial: Any) -> tuple:
    return (
        -testimonial.partner_rating,
        -(testimonial.helpful_votes or 0),
        -testimonial.created_at.timestamp(),
        testimonial.id,
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlCatalogStore(CatalogStore):
    def __init__(self, session: AsyncSession, strategy: SuccessRateStrategy = SuccessRateStrategy.PRECOMPUTED):
        self.session = session
        self.strategy = strategy

    def _stats_columns(self, stmt: sa.Select) -> tuple[sa.Select, Any, Any]:
        if self.strategy is not SuccessRateStrategy.ON_READ:
            return stmt, Gift.success_rate, Gift.total_reviews

        stats = (
            select(
                Testimonial.gift_id.label("gift_id"),
                func.count(Testimonial.id).label("reviews"),
                func.sum(case((Testimonial.partner_rating >= SUCCESS_RATING_THRESHOLD, 1), else_=0)).label(
                    "successes"
                ),
            )
            .group_by(Testimonial.gift_id)
            .subquery("testimonial_stats")
        )
        rate = case(
            (stats.c.reviews > 0, (200 * stats.c.successes + stats.c.reviews) // (2 * stats.c.reviews)),
            else_=Gift.success_rate,
        )
        reviews = func.coalesce(stats.c.reviews, Gift.total_reviews)
        return stmt.outerjoin(stats, stats.c.gift_id == Gift.id), rate, reviews

    def _where(self, filters: GiftFilters, rate: Any) -> list[Any]:
        clauses: list[Any] = [Gift.is_active.is_(True)]
        if filters.category is not None:
            clauses.append(Gift.category == filters.category)
        if filters.min_price is not None:
            clauses.append(Gift.price >= filters.min_price)
        if filters.max_price is not None:
            clauses.append(Gift.price <= filters.max_price)
        if filters.occasion is not None:
            clauses.append(Gift.occasion == filters.occasion)
        if filters.relationship_stage is not None:
            clauses.append(Gift.relationship_stage == filters.relationship_stage)
        if filters.min_success_rate is not None:
            clauses.append(rate >= filters.min_success_rate)
        if filters.search:
            pattern = f"%{_escape_like(filters.search)}%"
            clauses.append(
                or_(
                    Gift.title.ilike(pattern, escape="\\"),
                    Gift.description.ilike(pattern, escape="\\"),
                    Gift.category.ilike(pattern, escape="\\"),
                )
            )
        if filters.max_delivery_days is not None:
            clauses.append(func.coalesce(Gift.delivery_days, 0) <= filters.max_delivery_days)
        if filters.exclude_id is not None:
            clauses.append(Gift.id != filters.exclude_id)
        return clauses

    @staticmethod
    def _order_by(sort: SortKey, rate: Any, reviews: Any) -> list[Any]:
        columns = {
            "success_rate": rate,
            "total_reviews": reviews,
            "price": Gift.price,
            "created_at": Gift.created_at,
        }
        order = [
            columns[f.attribute].desc() if f.descending else columns[f.attribute].asc()
            for f in sort_fields(sort)
        ]
        # Insertion order breaks remaining ties so repeated queries page identically
        order.append(Gift.id.asc())
        return order

    @staticmethod
    def _to_record(gift: Gift, success_rate: Any, total_reviews: Any) -> GiftRecord:
        return GiftRecord(
            id=gift.id,
            title=gift.title,
            description=gift.description,
            price=gift.price,
            category=gift.category,
            occasion=gift.occasion,
            relationship_stage=gift.relationship_stage,
            image_url=gift.image_url,
            affiliate_url=gift.affiliate_url,
            retailer=gift.retailer,
            delivery_days=gift.delivery_days or 0,
            success_rate=int(success_rate or 0),
            total_reviews=int(total_reviews or 0),
            is_active=bool(gift.is_active),
            created_at=gift.created_at,
        )

    async def query(
        self,
        filters: GiftFilters,
        sort: SortKey = DEFAULT_SORT,
        page: Optional[PageRequest] = None,
    ) -> list[GiftRecord]:
        stmt, rate, reviews = self._stats_columns(select(Gift))
        stmt = stmt.add_columns(rate, reviews)
        stmt = stmt.where(*self._where(filters, rate)).order_by(*self._order_by(sort, rate, reviews))
        if page is not None:
            stmt = stmt.limit(page.limit).offset(page.offset)

        result = await self.session.execute(stmt)
        return [self._to_record(gift, sr, tr) for gift, sr, tr in result.all()]

    async def count(self, filters: GiftFilters) -> int:
        stmt, rate, _ = self._stats_columns(select(func.count(Gift.id)).select_from(Gift))
        stmt = stmt.where(*self._where(filters, rate))
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def get_gift(self, gift_id: int) -> Optional[GiftRecord]:
        stmt, rate, reviews = self._stats_columns(select(Gift))
        stmt = stmt.add_columns(rate, reviews).where(Gift.id == gift_id, Gift.is_active.is_(True))
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        gift, sr, tr = row
        return self._to_record(gift, sr, tr)

    async def testimonials_for(self, gift_id: int, limit: Optional[int] = None) -> list[Testimonial]:
        stmt = (
            select(Testimonial)
            .where(Testimonial.gift_id == gift_id)
            .order_by(
                Testimonial.partner_rating.desc(),
                Testimonial.helpful_votes.desc(),
                Testimonial.created_at.desc(),
                Testimonial.id.asc(),
            )
            # Vote counts change through bulk UPDATEs that bypass the identity map
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def increment_helpful(self, testimonial_id: int) -> Optional[int]:
        # Single UPDATE so concurrent votes cannot overwrite each other
        stmt = (
            update(Testimonial)
            .where(Testimonial.id == testimonial_id)
            .values(helpful_votes=Testimonial.helpful_votes + 1)
            .returning(Testimonial.helpful_votes)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def category_summaries(self) -> list[CategorySummary]:
        base, rate, _ = self._stats_columns(select(Gift.category).select_from(Gift))
        count_col = func.count(Gift.id).label("count")
        stmt = (
            base.add_columns(
                count_col,
                func.min(Gift.price).label("min_price"),
                func.max(Gift.price).label("max_price"),
                func.avg(rate).label("avg_success_rate"),
            )
            .where(Gift.is_active.is_(True))
            .group_by(Gift.category)
            .order_by(count_col.desc(), Gift.category.asc())
        )
        result = await self.session.execute(stmt)
        return [
            CategorySummary(
                category=row.category,
                count=int(row.count),
                min_price=float(row.min_price),
                max_price=float(row.max_price),
                avg_success_rate=int(row.avg_success_rate or 0),
            )
            for row in result.all()
        ]

    async def refresh_success_rates(self) -> int:
        reviews = (
            select(func.count(Testimonial.id))
            .where(Testimonial.gift_id == Gift.id)
            .correlate(Gift)
            .scalar_subquery()
        )
        successes = (
            select(func.sum(case((Testimonial.partner_rating >= SUCCESS_RATING_THRESHOLD, 1), else_=0)))
            .where(Testimonial.gift_id == Gift.id)
            .correlate(Gift)
            .scalar_subquery()
        )
        stmt = (
            update(Gift)
            .where(Gift.id.in_(select(Testimonial.gift_id).distinct()))
            .values(
                success_rate=(200 * successes + reviews) // (2 * reviews),
                total_reviews=reviews,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0


class InMemoryCatalogStore(CatalogStore):
    """Catalog held in process memory; same contract as the SQL store."""

    def __init__(
        self,
        gifts: Iterable[GiftRecord] = (),
        testimonials: Iterable[TestimonialRecord] = (),
        strategy: SuccessRateStrategy = SuccessRateStrategy.PRECOMPUTED,
    ):
        self._gifts: list[GiftRecord] = sorted(gifts, key=lambda g: g.id)
        self._testimonials: dict[int, TestimonialRecord] = {t.id: t for t in testimonials}
        self.strategy = strategy
        self._lock = asyncio.Lock()

    @classmethod
    def from_seed(
        cls,
        gifts: Sequence[dict[str, Any]],
        testimonials: Sequence[dict[str, Any]] = (),
        strategy: SuccessRateStrategy = SuccessRateStrategy.PRECOMPUTED,
    ) -> "InMemoryCatalogStore":
        gift_records = [GiftRecord.from_dict({**data, "id": idx}) for idx, data in enumerate(gifts, start=1)]
        testimonial_records = [
            TestimonialRecord.from_dict({**data, "id": idx}) for idx, data in enumerate(testimonials, start=1)
        ]
        return cls(gift_records, testimonial_records, strategy)

    def _live_gifts(self) -> list[GiftRecord]:
        if self.strategy is not SuccessRateStrategy.ON_READ:
            return list(self._gifts)
        stats = aggregate_by_gift(self._testimonials.values())
        return [with_stats(gift, stats.get(gift.id)) for gift in self._gifts]

    async def query(
        self,
        filters: GiftFilters,
        sort: SortKey = DEFAULT_SORT,
        page: Optional[PageRequest] = None,
    ) -> list[GiftRecord]:
        predicate = build_predicate(filters)
        ordered = sort_gifts((g for g in self._live_gifts() if predicate(g)), sort)
        if page is None:
            return ordered
        return ordered[page.offset : page.offset + page.limit]

    async def count(self, filters: GiftFilters) -> int:
        predicate = build_predicate(filters)
        return sum(1 for g in self._live_gifts() if predicate(g))

    async def get_gift(self, gift_id: int) -> Optional[GiftRecord]:
        for gift in self._live_gifts():
            if gift.id == gift_id and gift.is_active:
                return gift
        return None

    async def testimonials_for(self, gift_id: int, limit: Optional[int] = None) -> list[TestimonialRecord]:
        matching = sorted(
            (t for t in self._testimonials.values() if t.gift_id == gift_id),
            key=_testimonial_sort_key,
        )
        return matching[:limit] if limit is not None else matching

    async def increment_helpful(self, testimonial_id: int) -> Optional[int]:
        async with self._lock:
            testimonial = self._testimonials.get(testimonial_id)
            if testimonial is None:
                return None
            testimonial.helpful_votes += 1
            return testimonial.helpful_votes

    async def category_summaries(self) -> list[CategorySummary]:
        groups: dict[str, list[GiftRecord]] = {}
        for gift in self._live_gifts():
            if gift.is_active:
                groups.setdefault(gift.category, []).append(gift)
        summaries = [
            CategorySummary(
                category=category,
                count=len(items),
                min_price=float(min(g.price for g in items)),
                max_price=float(max(g.price for g in items)),
                avg_success_rate=int(sum(g.success_rate for g in items) / len(items)),
            )
            for category, items in groups.items()
        ]
        return sorted(summaries, key=lambda s: (-s.count, s.category))

    async def refresh_success_rates(self) -> int:
        async with self._lock:
            stats = aggregate_by_gift(self._testimonials.values())
            self._gifts = [with_stats(gift, stats.get(gift.id)) for gift in self._gifts]
        return len(stats)
