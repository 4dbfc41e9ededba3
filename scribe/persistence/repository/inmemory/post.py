"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from scribe.domain.error import ConflictError
from scribe.domain.model.post import Post
from scribe.domain.repository.post import PostQuery, PostRepository, SortDirection
from scribe.domain.value import PostId, PostState, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _posts(self) -> dict[PostId, Post]:
        return self._store.posts

    def _matches(self, post: Post, query: PostQuery) -> bool:
        if query.state is not None and post.state != query.state:
            return False
        if query.author_ids is not None and post.author_id not in query.author_ids:
            return False
        if query.title_contains and query.title_contains.lower() not in post.title.lower():
            return False
        if query.tags and not query.tags.intersection(post.tags):
            return False
        return True

    def _title_taken(self, post: Post) -> bool:
        return any(
            other.author_id == post.author_id
            and other.title == post.title
            and other.id != post.id
            for other in self._posts.values()
        )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_author_and_title(
        self, author_id: UserId, title: str
    ) -> Optional[Post]:
        """Find an author's post by exact title."""
        for post in self._posts.values():
            if post.author_id == author_id and post.title == title:
                return post
        return None

    async def find(self, query: PostQuery, limit: int, offset: int) -> list[Post]:
        """Find posts matching a query, sorted by its ordering."""
        posts = [p for p in self._posts.values() if self._matches(p, query)]

        field = query.ordering.field.value
        posts.sort(
            key=lambda p: (getattr(p, field), str(p.id)),
            reverse=query.ordering.direction == SortDirection.DESC,
        )

        # Paginate
        return posts[offset : offset + limit]

    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query."""
        return sum(1 for p in self._posts.values() if self._matches(p, query))

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        if self._title_taken(post):
            raise ConflictError(f"Duplicate title for author: {post.title}")
        self._posts[post.id] = post
        return post

    async def update(self, post: Post) -> Optional[Post]:
        """Replace a stored post, refreshing updated_at."""
        existing = self._posts.get(post.id)
        if existing is None:
            return None
        if self._title_taken(post):
            raise ConflictError(f"Duplicate title for author: {post.title}")

        updated = post.model_copy(
            update={
                "author_id": existing.author_id,
                "created_at": existing.created_at,
                "read_count": existing.read_count,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._posts[post.id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        return self._posts.pop(post_id, None) is not None

    async def increment_read_count(self, post_id: PostId) -> Optional[Post]:
        """Increment read_count by 1 on a published post.

        No await between read and write, so this is atomic on the event loop.
        """
        post = self._posts.get(post_id)
        if post is None or post.state != PostState.PUBLISHED:
            return None
        updated = post.model_copy(update={"read_count": post.read_count + 1})
        self._posts[post_id] = updated
        return updated
