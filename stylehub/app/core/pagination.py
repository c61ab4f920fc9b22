"""Core pagination helpers.

This module provides:
- `normalize_pagination` to turn raw page/limit query values into clamped,
  safe pagination parameters.
- `total_pages` and `page_response` to build list responses.

Rules:
    - page and limit read their leading integer ("5.5" -> 5, "2abc" -> 2)
    - page missing, non-numeric or < 1      -> DEFAULT_PAGE
    - page capped so the row offset fits a signed 64-bit integer
    - limit missing or non-numeric          -> DEFAULT_LIMIT
    - limit clamped into [MIN_LIMIT, MAX_LIMIT]
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 50
# Largest OFFSET the stores accept
MAX_SKIP = 2 ** 63 - 1

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def _parse_int(value: Optional[Any]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = LEADING_INT.match(str(value))
    if match is None:
        return None
    digits = match.group(1)
    if len(digits.lstrip("+-").lstrip("0")) > 19:
        return -MAX_SKIP if digits.startswith("-") else MAX_SKIP
    return int(digits)


def normalize_pagination(page: Optional[Any], limit: Optional[Any]) -> PageParams:
    parsed_page = _parse_int(page)
    if parsed_page is None or parsed_page < 1:
        parsed_page = DEFAULT_PAGE

    parsed_limit = _parse_int(limit)
    if parsed_limit is None:
        parsed_limit = DEFAULT_LIMIT
    parsed_limit = max(MIN_LIMIT, min(parsed_limit, MAX_LIMIT))
    parsed_page = min(parsed_page, MAX_SKIP // parsed_limit + 1)

    return PageParams(page=parsed_page, limit=parsed_limit)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def page_response(
    items: List[Any],
    total: int,
    params: PageParams,
    key: str = "data",
) -> Dict[str, Any]:
    """Wrap one page of results with its counters."""
    return {
        "total": total,
        "page": params.page,
        "limit": params.limit,
        "totalPages": total_pages(total, params.limit),
        key: items,
    }
