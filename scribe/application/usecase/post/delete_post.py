"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import PostService, parse_post_id
from scribe.domain.value import UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str = "Blog removed"


class DeletePostUseCase:
    """Use case for permanently deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
        """
        post_id = parse_post_id(request.post_id)

        with logfire.span("delete_post.execute", post_id=str(post_id)):
            post = await self.post_service.get_owned_post(
                post_id, UserId(UUID(request.user_id))
            )
            await self.post_service.delete_post(post)

            return DeletePostResponse()
