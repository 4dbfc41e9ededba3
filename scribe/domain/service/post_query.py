"""Translation of listing filters into store queries."""

from enum import Enum
from typing import Optional

import logfire
from pydantic import BaseModel

from scribe.domain.repository import (
    PostOrdering,
    PostQuery,
    PostSortField,
    SortDirection,
    UserRepository,
)
from scribe.domain.value import PostState, UserId

from .base import Service

# Public sort keys accepted in ``order_by``
_SORT_FIELDS = {
    "read_count": PostSortField.READ_COUNT,
    "reading_time": PostSortField.READING_TIME,
    "createdAt": PostSortField.CREATED_AT,
    "created_at": PostSortField.CREATED_AT,
}


class QueryMode(str, Enum):
    """Visibility regime of a listing."""

    PUBLIC = "public"  # Published posts of any author
    OWNER = "owner"  # All of the caller's own posts


class EmptyResult:
    """Marker returned when no post can possibly match."""

    def __repr__(self) -> str:
        return "EMPTY_RESULT"


EMPTY_RESULT = EmptyResult()


class PostFilters(BaseModel):
    """Raw listing filters as received from the client."""

    title: str | None = None
    author: str | None = None
    tags: str | None = None
    order_by: str | None = None
    state: str | None = None


def parse_tags(raw: str | None) -> frozenset[str]:
    """Split a comma-separated tag list, trimming and dropping blanks."""
    if not raw:
        return frozenset()
    return frozenset(tag.strip() for tag in raw.split(",") if tag.strip())


def parse_order_by(raw: str | None) -> PostOrdering:
    """Parse ``field:direction``.

    Unknown fields fall back to the default (newest first). Any direction
    other than ``asc`` sorts descending.
    """
    if not raw:
        return PostOrdering()

    field_name, _, direction = raw.partition(":")
    field = _SORT_FIELDS.get(field_name.strip())
    if field is None:
        return PostOrdering()

    return PostOrdering(
        field=field,
        direction=(
            SortDirection.ASC
            if direction.strip().lower() == "asc"
            else SortDirection.DESC
        ),
    )


def parse_state_filter(raw: str | None) -> Optional[PostState]:
    """Map a state filter to PostState; anything unrecognised is ignored."""
    try:
        return PostState(raw) if raw else None
    except ValueError:
        return None


class PostQueryBuilder(Service):
    """Builds store queries for public and owner listings."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize query builder.

        Args:
            user_repository: User repository, used to resolve author names
        """
        self.user_repository = user_repository

    async def build(
        self,
        filters: PostFilters,
        mode: QueryMode,
        caller_id: UserId | None = None,
    ) -> PostQuery | EmptyResult:
        """Build the store query for a listing.

        Args:
            filters: Client filters
            mode: Public (published only) or owner (caller's posts)
            caller_id: Authenticated caller, required in owner mode

        Returns:
            The query, or EMPTY_RESULT if the author filter matched nobody

        Raises:
            ValueError: If owner mode is requested without a caller
        """
        if mode == QueryMode.OWNER:
            if caller_id is None:
                raise ValueError("Owner listings require a caller")
            return PostQuery(
                author_ids=frozenset({caller_id}),
                state=parse_state_filter(filters.state),
            )

        author_ids = None
        if filters.author:
            with logfire.span("post_query.resolve_author", author=filters.author):
                matches = await self.user_repository.find_ids_by_name(filters.author)
                if not matches:
                    logfire.info("Author filter matched no users", author=filters.author)
                    return EMPTY_RESULT
                author_ids = frozenset(matches)

        tags = parse_tags(filters.tags)

        return PostQuery(
            state=PostState.PUBLISHED,
            author_ids=author_ids,
            title_contains=filters.title or None,
            tags=tags or None,
            ordering=parse_order_by(filters.order_by),
        )
