"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService
from scribe.domain.value import PostState, UserId

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    title: str
    body: str
    description: str = ""
    tags: list[str] = []
    state: PostState = PostState.DRAFT


class CreatePostResponse(PostItem):
    """Create post response."""


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate fields and compute reading time (via PostService)
        2. Reject duplicate titles for this author
        3. Save post

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If post validation fails
            ConflictError: If the author already has a post with this title
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(
                author_id=UserId(UUID(request.author_id)),
                title=request.title,
                body=request.body,
                description=request.description,
                tags=request.tags,
                state=request.state,
            )

            return CreatePostResponse.from_post(post)
