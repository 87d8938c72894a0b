"""
Query-string parsing for the gift catalog.

Inputs arrive as raw strings. Parsing is lenient by default: a value that
cannot be parsed is dropped, out-of-range numbers are clamped. With
``strict=True`` unparsable values raise ``QueryValidationError`` instead.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .filters import GiftFilters
from .pagination import PageRequest
from .sorting import DEFAULT_SORT, SortKey, is_known_sort, resolve_sort

SEARCH_MAX_LENGTH = 200
FIELD_MAX_LENGTH = 50

_ANGLE_BRACKETS = re.compile(r"[<>]")
_RECORD_ID_RE = re.compile(r"^[0-9]+$")


class QueryValidationError(ValueError):
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


@dataclass(frozen=True)
class QueryLimits:
    categories: tuple[str, ...]
    default_limit: int = 20
    max_limit: int = 100
    max_offset: int = 10000
    max_price: float = 100000


@dataclass(frozen=True)
class GiftQuery:
    filters: GiftFilters
    sort_by: SortKey
    page: PageRequest

    def echo(self) -> dict[str, Any]:
        return self.filters.echo()


def sanitize_string(value: Any, max_length: int = SEARCH_MAX_LENGTH) -> str:
    if not isinstance(value, str):
        return ""
    return _ANGLE_BRACKETS.sub("", value).strip()[:max_length].strip()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_float(value: Any, min_value: float = 0, max_value: float = math.inf) -> Optional[float]:
    if _is_blank(value):
        return None
    try:
        num = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if math.isnan(num):
        return None
    return min(max(num, min_value), max_value)


def parse_int(value: Any, min_value: int = 0, max_value: Optional[int] = None) -> Optional[int]:
    if _is_blank(value):
        return None
    raw = str(value).strip()
    try:
        num = int(raw)
    except ValueError:
        try:
            as_float = float(raw)
        except ValueError:
            return None
        if not math.isfinite(as_float):
            return None
        num = int(as_float)
    if num < min_value:
        return min_value
    if max_value is not None and num > max_value:
        return max_value
    return num


def validate_category(value: Any, allow_list: Iterable[str]) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return None
    sanitized = sanitize_string(value.lower(), FIELD_MAX_LENGTH)
    return sanitized if sanitized in set(allow_list) else None


def validate_record_id(value: Any) -> Optional[int]:
    sanitized = sanitize_string(str(value) if value is not None else None, FIELD_MAX_LENGTH)
    if not _RECORD_ID_RE.match(sanitized):
        return None
    record_id = int(sanitized)
    return record_id if record_id > 0 else None


def _text_filter(value: Any, max_length: int = FIELD_MAX_LENGTH) -> Optional[str]:
    cleaned = sanitize_string(value, max_length)
    return cleaned or None


def _numeric(params: Mapping[str, Any], name: str, parsed: Optional[Any], strict: bool) -> Optional[Any]:
    if parsed is None and strict and not _is_blank(params.get(name)):
        raise QueryValidationError(name, "must be a number")
    return parsed


def parse_gift_query(params: Mapping[str, Any], limits: QueryLimits, strict: bool = False) -> GiftQuery:
    raw_category = params.get("category")
    category = validate_category(raw_category, limits.categories)
    if category is None and strict and not _is_blank(raw_category):
        raise QueryValidationError("category", "unknown category")

    min_price = _numeric(params, "minPrice", parse_float(params.get("minPrice"), 0, limits.max_price), strict)
    max_price = _numeric(params, "maxPrice", parse_float(params.get("maxPrice"), 0, limits.max_price), strict)
    min_success_rate = _numeric(
        params, "minSuccessRate", parse_int(params.get("minSuccessRate"), 0, 100), strict
    )

    filters = GiftFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        occasion=_text_filter(params.get("occasion")),
        relationship_stage=_text_filter(params.get("relationshipStage")),
        min_success_rate=min_success_rate,
        search=_text_filter(params.get("search"), SEARCH_MAX_LENGTH),
    )

    raw_sort = params.get("sortBy")
    if strict and not _is_blank(raw_sort) and not is_known_sort(raw_sort):
        raise QueryValidationError("sortBy", "unsupported sort key")
    sort_by = resolve_sort(raw_sort) if not _is_blank(raw_sort) else DEFAULT_SORT

    limit = _numeric(params, "limit", parse_int(params.get("limit"), 1, limits.max_limit), strict)
    limit = limit or limits.default_limit

    offset = _numeric(params, "offset", parse_int(params.get("offset"), 0, limits.max_offset), strict)
    if offset is None:
        page_number = _numeric(params, "page", parse_int(params.get("page"), 1), strict)
        offset = min((page_number - 1) * limit, limits.max_offset) if page_number else 0

    return GiftQuery(filters=filters, sort_by=sort_by, page=PageRequest(limit=limit, offset=offset))
