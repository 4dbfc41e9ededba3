"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from scribe.application.usecase.auth import GetCurrentUserUseCase
from scribe.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPublishedPostRequest,
    GetPublishedPostResponse,
    GetPublishedPostUseCase,
    ListMyPostsRequest,
    ListMyPostsResponse,
    ListMyPostsUseCase,
    ListPublishedPostsRequest,
    ListPublishedPostsResponse,
    ListPublishedPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostStateRequest,
    UpdatePostStateResponse,
    UpdatePostStateUseCase,
    UpdatePostUseCase,
)
from scribe.domain.value import PostState
from scribe.interface.api.security import authenticate

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    body: str
    description: str = ""
    tags: list[str] = []
    state: PostState = PostState.DRAFT


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post; omitted fields stay unchanged."""

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    body: str | None = None
    state: PostState | None = None


class UpdatePostStateAPIRequest(BaseModel):
    """API request for changing a post's state."""

    state: str | None = None


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication. Posts start as drafts unless ``state`` says
    otherwise.
    """
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    return await create_post_use_case.execute(
        CreatePostRequest(
            author_id=user.id,
            title=request.title,
            body=request.body,
            description=request.description,
            tags=request.tags,
            state=request.state,
        )
    )


@router.get("", response_model=ListPublishedPostsResponse)
async def list_published_posts(
    list_published_posts_use_case: FromDishka[ListPublishedPostsUseCase],
    page: str | None = None,
    limit: str | None = None,
    title: str | None = None,
    author: str | None = None,
    tags: str | None = None,
    order_by: str | None = None,
) -> ListPublishedPostsResponse:
    """List published posts.

    Query parameters:
        page: 1-based page number (default 1)
        limit: Page size (default 20)
        title: Case-insensitive title substring
        author: Case-insensitive fragment of the author's first or last name
        tags: Comma-separated tags; posts with any of them match
        order_by: ``read_count``, ``reading_time`` or ``createdAt`` with an
            optional ``:asc``/``:desc`` suffix
    """
    return await list_published_posts_use_case.execute(
        ListPublishedPostsRequest(
            page=page,
            limit=limit,
            title=title,
            author=author,
            tags=tags,
            order_by=order_by,
        )
    )


# Must be registered before /{post_id}
@router.get("/my-blogs", response_model=ListMyPostsResponse)
async def list_my_posts(
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: str | None = None,
    limit: str | None = None,
    state: str | None = None,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListMyPostsResponse:
    """List the caller's posts, drafts included."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    return await list_my_posts_use_case.execute(
        ListMyPostsRequest(author_id=user.id, page=page, limit=limit, state=state)
    )


@router.get("/{post_id}", response_model=GetPublishedPostResponse)
async def get_published_post(
    post_id: str,
    get_published_post_use_case: FromDishka[GetPublishedPostUseCase],
) -> GetPublishedPostResponse:
    """Read a published post; each read increments its read count."""
    return await get_published_post_use_case.execute(
        GetPublishedPostRequest(post_id=post_id)
    )


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Edit a post. Only the author may do this."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=user.id,
            **request.model_dump(exclude_none=True),
        )
    )


@router.patch("/{post_id}/state", response_model=UpdatePostStateResponse)
async def update_post_state(
    post_id: str,
    request: UpdatePostStateAPIRequest,
    update_post_state_use_case: FromDishka[UpdatePostStateUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostStateResponse:
    """Publish or unpublish a post. Only the author may do this."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    return await update_post_state_use_case.execute(
        UpdatePostStateRequest(post_id=post_id, user_id=user.id, state=request.state)
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post permanently. Only the author may do this."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user.id)
    )
