from fastapi import Query
from typing import NamedTuple, Optional
import math

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class Pagination(NamedTuple):
    page: int
    limit: int
    offset: int


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve_pagination(page: Optional[str] = None, limit: Optional[str] = None) -> Pagination:
    """Clamp raw page/limit values; bad input falls back to page 1 and 10 per page"""
    page_number = _parse_int(page)
    if page_number is None or page_number < 1:
        page_number = DEFAULT_PAGE

    page_size = _parse_int(limit)
    if page_size is None or page_size < 1 or page_size > MAX_LIMIT:
        page_size = DEFAULT_LIMIT

    return Pagination(page=page_number, limit=page_size, offset=(page_number - 1) * page_size)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


async def get_pagination(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
) -> Pagination:
    """Dependency reading ?page=&limit= as raw strings so bad values clamp instead of failing"""
    return resolve_pagination(page, limit)
