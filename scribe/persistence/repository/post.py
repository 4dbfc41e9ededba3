"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Post
from scribe.domain.repository.post import (
    PostQuery,
    PostRepository,
    PostSortField,
    SortDirection,
)
from scribe.domain.value import PostId, PostState, UserId
from scribe.persistence.error import escape_like, translate_errors
from scribe.persistence.mappers import post_to_dict, row_to_post
from scribe.persistence.tables import posts_table

UNIQUE_TITLE_CONSTRAINT = "uq_posts_author_title"

_SORT_COLUMNS = {
    PostSortField.READ_COUNT: posts_table.c.read_count,
    PostSortField.READING_TIME: posts_table.c.reading_time,
    PostSortField.CREATED_AT: posts_table.c.created_at,
}


def _apply_filters(stmt: Select, query: PostQuery) -> Select:
    """Add the query's predicates to a statement."""
    if query.state is not None:
        stmt = stmt.where(posts_table.c.state == query.state.value)

    if query.author_ids is not None:
        stmt = stmt.where(posts_table.c.author_id.in_(list(query.author_ids)))

    if query.title_contains:
        pattern = f"%{escape_like(query.title_contains)}%"
        stmt = stmt.where(posts_table.c.title.ilike(pattern, escape="\\"))

    if query.tags:
        # Any shared tag matches
        stmt = stmt.where(posts_table.c.tags.overlap(sorted(query.tags)))

    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with translate_errors("post_repository.find_by_id"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_by_author_and_title(
        self, author_id: UserId, title: str
    ) -> Optional[Post]:
        """Find an author's post by exact title."""
        with translate_errors("post_repository.find_by_author_and_title"):
            stmt = select(posts_table).where(
                posts_table.c.author_id == author_id,
                posts_table.c.title == title,
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

        return row_to_post(row._asdict()) if row else None

    async def find(self, query: PostQuery, limit: int, offset: int) -> List[Post]:
        """Find posts matching a query, sorted by its ordering."""
        with logfire.span(
            "post_repository.find",
            state=query.state.value if query.state else None,
            ordering=query.ordering.field.value,
            direction=query.ordering.direction.value,
            limit=limit,
            offset=offset,
        ):
            column = _SORT_COLUMNS[query.ordering.field]
            direction = asc if query.ordering.direction == SortDirection.ASC else desc

            # Tie-break on id so pages never overlap
            stmt = (
                _apply_filters(select(posts_table), query)
                .order_by(direction(column), direction(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            with translate_errors("post_repository.find"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            posts = [row_to_post(row._asdict()) for row in rows]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query."""
        with logfire.span("post_repository.count"):
            stmt = _apply_filters(select(func.count()).select_from(posts_table), query)

            with translate_errors("post_repository.count"):
                result = await self.session.execute(stmt)
                count = result.scalar() or 0

            logfire.info("Post count", count=count)
            return count

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.create", post_id=str(post.id), title=post.title
        ):
            stmt = posts_table.insert().values(**post_to_dict(post)).returning(posts_table)

            with translate_errors("post_repository.create", UNIQUE_TITLE_CONSTRAINT):
                # Savepoint keeps the request transaction usable after a conflict
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()

            logfire.info("Post inserted", post_id=str(post.id))
            return row_to_post(row._asdict())

    async def update(self, post: Post) -> Optional[Post]:
        """Replace a stored post, refreshing updated_at."""
        with logfire.span("post_repository.update", post_id=str(post.id)):
            values = post_to_dict(post)
            for immutable in ("id", "author_id", "created_at", "read_count"):
                values.pop(immutable)
            values["updated_at"] = func.now()

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**values)
                .returning(posts_table)
            )

            with translate_errors("post_repository.update", UNIQUE_TITLE_CONSTRAINT):
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()

            if row is None:
                logfire.warn("Post not found for update", post_id=str(post.id))
                return None

            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)

            with translate_errors("post_repository.delete"):
                result = await self.session.execute(stmt)
                await self.session.flush()

            return result.rowcount > 0

    async def increment_read_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment read_count by 1 on a published post."""
        with logfire.span("post_repository.increment_read_count", post_id=str(post_id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .where(posts_table.c.state == PostState.PUBLISHED.value)
                .values(read_count=posts_table.c.read_count + 1)
                .returning(posts_table)
            )

            with translate_errors("post_repository.increment_read_count"):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            return row_to_post(row._asdict()) if row else None
