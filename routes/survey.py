from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from app.deps import get_catalog_store, get_query_limits
from app.metrics import catalog_query_latency_ms
from app.repositories.catalog import CatalogStore
from app.schemas import SurveyAnswers, gift_payload
from app.utils.rate_limit import api_rate_limit
from catalog.pagination import PageRequest
from catalog.presets import SURVEY_RESULT_LIMIT, survey_filters, survey_questions
from catalog.sorting import SortKey
from catalog.validation import QueryLimits

router = APIRouter(prefix="/api", tags=["Survey"], dependencies=[Depends(api_rate_limit)])


@router.get("/survey")
async def get_survey(limits: QueryLimits = Depends(get_query_limits)) -> list[dict]:
    return survey_questions(limits.categories)


@router.post("/survey-result")
async def survey_result(
    answers: SurveyAnswers,
    store: CatalogStore = Depends(get_catalog_store),
    limits: QueryLimits = Depends(get_query_limits),
) -> dict:
    """
    Top gifts for the quiz answers, best success rate first.
    """
    filters = survey_filters(limits, answers.category, answers.budget_min, answers.budget_max)
    started = time.perf_counter()
    gifts = await store.query(filters, SortKey.SUCCESS_RATE, PageRequest(limit=SURVEY_RESULT_LIMIT))
    catalog_query_latency_ms.labels(endpoint="survey").observe((time.perf_counter() - started) * 1000)
    return {"suggestions": [gift_payload(gift) for gift in gifts]}
