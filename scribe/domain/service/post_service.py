"""Post domain service."""

from typing import Any
from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from scribe.domain.error import ConflictError, NotAuthorizedError, NotFoundError, ValidationError
from scribe.domain.model.post import Post, is_post_owner
from scribe.domain.repository import PostQuery, PostRepository
from scribe.domain.value import PostId, PostState, UserId

from .base import Service
from .pagination import Pagination
from .reading_time import estimate_reading_time

DUPLICATE_TITLE_MESSAGE = "You already have a blog with this title."

# Fields an author may change after creation
EDITABLE_FIELDS = frozenset({"title", "description", "tags", "body", "state"})


def parse_post_id(raw: str) -> PostId:
    """Parse a client-supplied post ID.

    Malformed IDs cannot name any post, so they are reported as not found.

    Raises:
        NotFoundError: If ``raw`` is not a UUID
    """
    try:
        return PostId(UUID(str(raw)))
    except ValueError:
        raise NotFoundError("Post", str(raw))


def build_post(**fields: Any) -> Post:
    """Validate fields into a Post, raising the domain ValidationError."""
    try:
        return Post.model_validate(fields)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e)


class PostService(Service):
    """Domain service for post lifecycle operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def ensure_title_available(
        self, author_id: UserId, title: str, exclude: PostId | None = None
    ) -> None:
        """Check that the author has no other post with this title.

        The store's unique constraint is the real guard; this only lets the
        common case fail early.

        Raises:
            ConflictError: If the title is taken
        """
        existing = await self.post_repository.find_by_author_and_title(
            author_id, title.strip()
        )
        if existing is not None and existing.id != exclude:
            logfire.info(
                "Duplicate post title rejected",
                author_id=str(author_id),
                title=title,
            )
            raise ConflictError(DUPLICATE_TITLE_MESSAGE)

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        body: str,
        description: str = "",
        tags: list[str] | None = None,
        state: PostState = PostState.DRAFT,
    ) -> Post:
        """Create and store a new post.

        Args:
            author_id: Authenticated author
            title: Post title
            body: Post body
            description: Optional summary
            tags: Optional tags
            state: Initial state (draft unless requested otherwise)

        Returns:
            The stored post

        Raises:
            ValidationError: If any field is invalid
            ConflictError: If the author already has a post with this title
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            post = build_post(
                id=PostId(uuid4()),
                title=title,
                description=description,
                body=body,
                tags=tags or [],
                author_id=author_id,
                state=state,
                read_count=0,
                reading_time=estimate_reading_time(body),
            )

            await self.ensure_title_available(author_id, post.title)

            try:
                saved = await self.post_repository.create(post)
            except ConflictError:
                logfire.warn(
                    "Duplicate post title caught by store",
                    author_id=str(author_id),
                    title=post.title,
                )
                raise ConflictError(DUPLICATE_TITLE_MESSAGE)

            logfire.info(
                "Post created",
                post_id=str(saved.id),
                state=saved.state.value,
                reading_time=saved.reading_time,
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_owned_post(self, post_id: PostId, caller_id: UserId) -> Post:
        """Load a post the caller is about to modify.

        Args:
            post_id: Post ID
            caller_id: Authenticated caller

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is not the author
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))

        if not is_post_owner(post, caller_id):
            logfire.warn(
                "Post modification by non-owner rejected",
                post_id=str(post_id),
                caller_id=str(caller_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(caller_id))

        return post

    async def update_post(self, post: Post, changes: dict[str, Any]) -> Post:
        """Apply field changes to a post and store it.

        Only keys present in ``changes`` are touched. Changing the body
        recomputes the reading time.

        Args:
            post: Current post
            changes: New values keyed by field name

        Returns:
            The stored post

        Raises:
            ValidationError: If a change is invalid or names a read-only field
            ConflictError: If the new title is already used by the author
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Fields cannot be changed: {', '.join(sorted(unknown))}")

        with logfire.span(
            "post_service.update_post",
            post_id=str(post.id),
            fields=sorted(changes),
        ):
            fields = {**post.model_dump(), **changes}
            if "body" in changes:
                fields["reading_time"] = estimate_reading_time(changes["body"])

            updated = build_post(**fields)

            if updated.title != post.title:
                await self.ensure_title_available(
                    post.author_id, updated.title, exclude=post.id
                )

            try:
                saved = await self.post_repository.update(updated)
            except ConflictError:
                logfire.warn(
                    "Duplicate post title caught by store",
                    post_id=str(post.id),
                    title=updated.title,
                )
                raise ConflictError(DUPLICATE_TITLE_MESSAGE)

            if saved is None:
                raise NotFoundError("Post", str(post.id))

            logfire.info("Post updated", post_id=str(saved.id), state=saved.state.value)
            return saved

    async def delete_post(self, post: Post) -> None:
        """Delete a post permanently.

        Raises:
            NotFoundError: If the post vanished in the meantime
        """
        with logfire.span("post_service.delete_post", post_id=str(post.id)):
            deleted = await self.post_repository.delete(post.id)
            if not deleted:
                raise NotFoundError("Post", str(post.id))
            logfire.info("Post deleted", post_id=str(post.id))

    async def record_read(self, post_id: PostId) -> Post:
        """Count one public read of a published post.

        The increment and fetch happen in one store operation, so concurrent
        readers never lose counts.

        Args:
            post_id: Post ID

        Returns:
            The post with its new read count

        Raises:
            NotFoundError: If no published post has this ID (drafts included)
        """
        with logfire.span("post_service.record_read", post_id=str(post_id)):
            post = await self.post_repository.increment_read_count(post_id)
            if post is None:
                logfire.info("Published post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Post read recorded", post_id=str(post_id), read_count=post.read_count
            )
            return post

    async def count_posts(self, query: PostQuery) -> int:
        """Count posts matching a query."""
        return await self.post_repository.count(query)

    async def find_posts(self, query: PostQuery, pagination: Pagination) -> list[Post]:
        """Fetch one page of posts matching a query."""
        with logfire.span(
            "post_service.find_posts",
            skip=pagination.skip,
            limit=pagination.limit,
            ordering=query.ordering.field.value,
        ):
            posts = await self.post_repository.find(
                query, limit=pagination.limit, offset=pagination.skip
            )
            logfire.info("Posts found", count=len(posts))
            return posts
