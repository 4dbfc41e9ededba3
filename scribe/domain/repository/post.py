"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pydantic import Field

from scribe.domain.model.post import Post
from scribe.domain.value import PostId, PostState, UserId
from scribe.domain.value.common import ValueObject


class PostSortField(str, Enum):
    """Sortable post fields."""

    READ_COUNT = "read_count"
    READING_TIME = "reading_time"
    CREATED_AT = "created_at"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class PostOrdering(ValueObject):
    """Sort order for post listings."""

    field: PostSortField = PostSortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class PostQuery(ValueObject):
    """Store-level predicate for post listings.

    Every set attribute narrows the result (logical AND). ``author_ids``
    and ``tags`` match when the post's value is any of the given ones.
    """

    state: Optional[PostState] = None
    author_ids: Optional[frozenset[UserId]] = None
    title_contains: Optional[str] = None
    tags: Optional[frozenset[str]] = None
    ordering: PostOrdering = Field(default_factory=PostOrdering)


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer and raise StoreError for
    failures they cannot classify.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author_and_title(
        self, author_id: UserId, title: str
    ) -> Optional[Post]:
        """Find an author's post by exact title.

        Args:
            author_id: The author's user ID
            title: Trimmed post title

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(self, query: PostQuery, limit: int, offset: int) -> list[Post]:
        """Find posts matching a query, sorted by its ordering.

        Args:
            query: Filters and sort order
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the query
        """
        pass

    @abstractmethod
    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query.

        Args:
            query: Filters (ordering is ignored)

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The stored post

        Raises:
            ConflictError: If the author already has a post with this title
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> Optional[Post]:
        """Replace a stored post, refreshing ``updated_at``.

        Args:
            post: The post with its new field values

        Returns:
            The stored post, or None if it no longer exists

        Raises:
            ConflictError: If the new title collides with another of the author's posts
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post permanently.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def increment_read_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically add one read to a published post and return it.

        Drafts and missing posts are left untouched.

        Args:
            post_id: The post ID

        Returns:
            The updated post, or None if no published post has this ID
        """
        pass
