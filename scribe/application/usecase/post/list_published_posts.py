"""List published posts use case."""

import logfire
from pydantic import BaseModel

from scribe.config import PaginationSettings
from scribe.domain.service import (
    EmptyResult,
    PostFilters,
    PostQueryBuilder,
    PostService,
    QueryMode,
    UserService,
    paginate,
    parse_limit,
    parse_page,
)

from .common import PostItem, PostPage


class ListPublishedPostsRequest(BaseModel):
    """List published posts request.

    Values are passed through as the client sent them; page and limit are
    parsed leniently.
    """

    page: str | None = None
    limit: str | None = None
    title: str | None = None
    author: str | None = None
    tags: str | None = None
    order_by: str | None = None


class ListPublishedPostsResponse(PostPage):
    """List published posts response."""


class ListPublishedPostsUseCase:
    """Use case for the public post listing."""

    def __init__(
        self,
        query_builder: PostQueryBuilder,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list published posts use case.

        Args:
            query_builder: Listing query builder
            post_service: Post domain service
            user_service: User domain service (author display fields)
            pagination_settings: Default and maximum page size
        """
        self.query_builder = query_builder
        self.post_service = post_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: ListPublishedPostsRequest
    ) -> ListPublishedPostsResponse:
        """Execute public listing flow.

        An author filter that matches nobody short-circuits before the post
        store is queried.

        Args:
            request: Filters and pagination

        Returns:
            One page of published posts with author display fields
        """
        page = parse_page(request.page)
        limit = parse_limit(
            request.limit,
            default=self.pagination_settings.default_limit,
            maximum=self.pagination_settings.max_limit,
        )

        with logfire.span(
            "list_published_posts.execute",
            page=page,
            limit=limit,
            title=request.title,
            author=request.author,
            tags=request.tags,
            order_by=request.order_by,
        ):
            filters = PostFilters(
                title=request.title,
                author=request.author,
                tags=request.tags,
                order_by=request.order_by,
            )
            query = await self.query_builder.build(filters, QueryMode.PUBLIC)

            if isinstance(query, EmptyResult):
                return ListPublishedPostsResponse(
                    blogs=[], total_pages=0, current_page=page
                )

            total = await self.post_service.count_posts(query)
            pagination = paginate(page, limit, total)
            posts = await self.post_service.find_posts(query, pagination)

            # One lookup for all authors on the page
            authors = await self.user_service.get_users_by_ids(
                post.author_id for post in posts
            )

            logfire.info("Published posts listed", count=len(posts), total=total)

            return ListPublishedPostsResponse(
                blogs=[
                    PostItem.from_post(post, authors.get(post.author_id))
                    for post in posts
                ],
                total_pages=pagination.total_pages,
                current_page=page,
            )
