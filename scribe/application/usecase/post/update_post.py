"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService, parse_post_id
from scribe.domain.value import PostState, UserId

from .common import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed.
    """

    post_id: str  # As sent by the client
    user_id: str  # Current user ID (must be author)
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    body: str | None = None
    state: PostState | None = None


class UpdatePostResponse(PostItem):
    """Update post response."""


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Steps:
        1. Load the post and check the caller owns it
        2. Apply the present fields (body changes recompute reading time)
        3. Reject a title already used by another of the caller's posts

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
            ValidationError: If a new value is invalid
            ConflictError: If the new title is taken
        """
        post_id = parse_post_id(request.post_id)
        caller_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_post.execute", post_id=str(post_id), user_id=request.user_id
        ):
            post = await self.post_service.get_owned_post(post_id, caller_id)

            changes = request.model_dump(
                include={"title", "description", "tags", "body", "state"},
                exclude_none=True,
            )
            updated = await self.post_service.update_post(post, changes)

            return UpdatePostResponse.from_post(updated)
