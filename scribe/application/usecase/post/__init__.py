"""Post use cases."""

from .common import AuthorInfo, PostItem, PostPage
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_published_post import (
    GetPublishedPostRequest,
    GetPublishedPostResponse,
    GetPublishedPostUseCase,
)
from .list_my_posts import ListMyPostsRequest, ListMyPostsResponse, ListMyPostsUseCase
from .list_published_posts import (
    ListPublishedPostsRequest,
    ListPublishedPostsResponse,
    ListPublishedPostsUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase
from .update_post_state import (
    UpdatePostStateRequest,
    UpdatePostStateResponse,
    UpdatePostStateUseCase,
)

__all__ = [
    "AuthorInfo",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPublishedPostRequest",
    "GetPublishedPostResponse",
    "GetPublishedPostUseCase",
    "ListMyPostsRequest",
    "ListMyPostsResponse",
    "ListMyPostsUseCase",
    "ListPublishedPostsRequest",
    "ListPublishedPostsResponse",
    "ListPublishedPostsUseCase",
    "PostItem",
    "PostPage",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostStateRequest",
    "UpdatePostStateResponse",
    "UpdatePostStateUseCase",
    "UpdatePostUseCase",
]
