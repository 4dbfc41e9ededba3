"""Update post state use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.error import ValidationError
from scribe.domain.service import PostService, parse_post_id
from scribe.domain.value import PostState, UserId

from .common import PostItem

INVALID_STATE_MESSAGE = 'Invalid state provided. Must be "draft" or "published".'


class UpdatePostStateRequest(BaseModel):
    """Update post state request."""

    post_id: str
    user_id: str  # Current user ID (must be author)
    state: str | None = None  # Validated by the use case


class UpdatePostStateResponse(PostItem):
    """Update post state response."""


class UpdatePostStateUseCase:
    """Use case for publishing or unpublishing a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdatePostStateRequest) -> UpdatePostStateResponse:
        """Move a post between draft and published.

        The state is checked before the post is looked up.

        Raises:
            ValidationError: If the state is not draft or published
            NotFoundError: If post doesn't exist
            NotAuthorizedError: If user is not the author
        """
        try:
            state = PostState(request.state)
        except ValueError:
            raise ValidationError(INVALID_STATE_MESSAGE)

        post_id = parse_post_id(request.post_id)
        caller_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_post_state.execute", post_id=str(post_id), state=state.value
        ):
            post = await self.post_service.get_owned_post(post_id, caller_id)
            updated = await self.post_service.update_post(post, {"state": state})

            return UpdatePostStateResponse.from_post(updated)
