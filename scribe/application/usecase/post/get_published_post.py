"""Get published post use case."""

from pydantic import BaseModel

from scribe.domain.service import PostService, UserService, parse_post_id

from .common import PostItem


class GetPublishedPostRequest(BaseModel):
    """Get published post request."""

    post_id: str  # As sent by the client, may be malformed


class GetPublishedPostResponse(PostItem):
    """Get published post response."""


class GetPublishedPostUseCase:
    """Use case for reading a single published post.

    Every successful read counts towards the post's read_count.
    """

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPublishedPostRequest) -> GetPublishedPostResponse:
        """Fetch a published post and record the read.

        Raises:
            NotFoundError: If the ID is malformed, unknown, or names a draft
        """
        post_id = parse_post_id(request.post_id)
        post = await self.post_service.record_read(post_id)

        authors = await self.user_service.get_users_by_ids([post.author_id])

        return GetPublishedPostResponse.from_post(post, authors.get(post.author_id))
