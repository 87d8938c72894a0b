from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.deps import get_catalog_store
from app.metrics import testimonial_helpful_votes_total
from app.repositories.catalog import CatalogStore
from app.schemas import HelpfulVoteResponse, testimonial_payload
from app.utils.errors import NotFoundError
from app.utils.rate_limit import api_rate_limit
from catalog.validation import validate_record_id

router = APIRouter(prefix="/api/testimonials", tags=["Testimonials"], dependencies=[Depends(api_rate_limit)])
logger = logging.getLogger(__name__)


@router.get("/{gift_id}")
async def list_testimonials(gift_id: str, store: CatalogStore = Depends(get_catalog_store)) -> list[dict]:
    parsed_id = validate_record_id(gift_id)
    gift = await store.get_gift(parsed_id) if parsed_id is not None else None
    if gift is None:
        raise NotFoundError("gift_not_found", "Gift not found")
    return [testimonial_payload(t) for t in await store.testimonials_for(gift.id)]


@router.post("/{testimonial_id}/helpful", response_model=HelpfulVoteResponse)
async def mark_helpful(
    testimonial_id: str,
    store: CatalogStore = Depends(get_catalog_store),
    db: AsyncSession = Depends(get_db),
):
    """
    Adds one helpful vote. The increment is a single UPDATE, so concurrent votes are never lost.
    """
    parsed_id = validate_record_id(testimonial_id)
    votes = await store.increment_helpful(parsed_id) if parsed_id is not None else None
    if votes is None:
        raise NotFoundError("testimonial_not_found", "Testimonial not found")

    await db.commit()
    testimonial_helpful_votes_total.inc()
    logger.info(f"Helpful vote recorded for testimonial {parsed_id} (now {votes})")
    return HelpfulVoteResponse(helpful_votes=votes)
