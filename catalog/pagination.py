from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class PageRequest:
    limit: int = 20
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be >= 1")
        if self.offset < 0:
            raise ValueError("offset must be >= 0")

    @property
    def page(self) -> int:
        # Best-effort when offset is not a multiple of limit
        return self.offset // self.limit + 1


@dataclass(frozen=True)
class PaginationMeta:
    total: int
    count: int
    limit: int
    offset: int
    has_more: bool
    page: int
    total_pages: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_pagination(total: int, count: int, request: PageRequest) -> PaginationMeta:
    return PaginationMeta(
        total=total,
        count=count,
        limit=request.limit,
        offset=request.offset,
        has_more=request.offset + count < total,
        page=request.page,
        total_pages=math.ceil(total / request.limit) if total else 0,
    )


def paginate(items: Sequence[Any], request: PageRequest) -> tuple[list[Any], PaginationMeta]:
    window = list(items[request.offset : request.offset + request.limit])
    return window, build_pagination(len(items), len(window), request)
