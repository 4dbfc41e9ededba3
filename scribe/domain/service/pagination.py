"""Pagination arithmetic for post listings."""

import math
from typing import Any

from pydantic import Field

from scribe.domain.value.common import ValueObject

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


class Pagination(ValueObject):
    """Resolved page window."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    skip: int = Field(ge=0)
    total_pages: int = Field(ge=0)


def _positive_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def parse_page(raw: Any) -> int:
    """Parse a client-supplied page number.

    Missing, non-numeric and non-positive values all mean the first page.
    """
    return _positive_int(raw) or DEFAULT_PAGE


def parse_limit(raw: Any, default: int = DEFAULT_LIMIT, maximum: int | None = None) -> int:
    """Parse a client-supplied page size.

    Missing, non-numeric and non-positive values fall back to ``default``;
    values above ``maximum`` are clamped to it.
    """
    limit = _positive_int(raw) or default
    if maximum is not None:
        limit = min(limit, maximum)
    return limit


def paginate(page: int, limit: int, total_count: int) -> Pagination:
    """Compute the skip offset and page count for a listing.

    Pages beyond the last one are allowed; they simply select nothing.

    Args:
        page: 1-based page number
        limit: Page size
        total_count: Number of items matching the listing

    Returns:
        Pagination with skip and total_pages filled in
    """
    return Pagination(
        page=page,
        limit=limit,
        skip=(page - 1) * limit,
        total_pages=math.ceil(total_count / limit) if total_count > 0 else 0,
    )
