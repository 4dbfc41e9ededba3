"""List own posts use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.config import PaginationSettings
from scribe.domain.service import (
    EmptyResult,
    PostFilters,
    PostQueryBuilder,
    PostService,
    QueryMode,
    paginate,
    parse_limit,
    parse_page,
)
from scribe.domain.value import UserId

from .common import PostItem, PostPage


class ListMyPostsRequest(BaseModel):
    """List own posts request."""

    author_id: str  # User ID from authenticated user
    page: str | None = None
    limit: str | None = None
    state: str | None = None  # "draft" or "published", anything else ignored


class ListMyPostsResponse(PostPage):
    """List own posts response."""


class ListMyPostsUseCase:
    """Use case for listing the caller's posts, drafts included."""

    def __init__(
        self,
        query_builder: PostQueryBuilder,
        post_service: PostService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list own posts use case.

        Args:
            query_builder: Listing query builder
            post_service: Post domain service
            pagination_settings: Default and maximum page size
        """
        self.query_builder = query_builder
        self.post_service = post_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListMyPostsRequest) -> ListMyPostsResponse:
        """Execute owner listing flow.

        Args:
            request: Caller, optional state filter and pagination

        Returns:
            One page of the caller's posts, newest first
        """
        page = parse_page(request.page)
        limit = parse_limit(
            request.limit,
            default=self.pagination_settings.default_limit,
            maximum=self.pagination_settings.max_limit,
        )

        with logfire.span(
            "list_my_posts.execute",
            author_id=request.author_id,
            page=page,
            limit=limit,
            state=request.state,
        ):
            query = await self.query_builder.build(
                PostFilters(state=request.state),
                QueryMode.OWNER,
                caller_id=UserId(UUID(request.author_id)),
            )
            if isinstance(query, EmptyResult):
                return ListMyPostsResponse(blogs=[], total_pages=0, current_page=page)

            total = await self.post_service.count_posts(query)
            pagination = paginate(page, limit, total)
            posts = await self.post_service.find_posts(query, pagination)

            logfire.info("Own posts listed", count=len(posts), total=total)

            return ListMyPostsResponse(
                blogs=[PostItem.from_post(post) for post in posts],
                total_pages=pagination.total_pages,
                current_page=page,
            )
