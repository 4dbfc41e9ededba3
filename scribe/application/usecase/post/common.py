"""Response models shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from scribe.domain.model import Post, User
from scribe.domain.value import PostState


class AuthorInfo(BaseModel):
    """Public author display fields."""

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorInfo":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.root,
        )


class PostItem(BaseModel):
    """Post as returned to clients.

    ``author`` carries display fields on public reads and the bare author ID
    everywhere else.
    """

    id: str
    title: str
    description: str
    tags: list[str]
    body: str
    author: AuthorInfo | str
    state: PostState
    read_count: int
    reading_time: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, author: User | None = None) -> "PostItem":
        return cls(
            id=str(post.id),
            title=post.title,
            description=post.description,
            tags=list(post.tags),
            body=post.body,
            author=AuthorInfo.from_user(author) if author else str(post.author_id),
            state=post.state,
            read_count=post.read_count,
            reading_time=post.reading_time,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostPage(BaseModel):
    """One page of a post listing."""

    blogs: list[PostItem]
    total_pages: int = Field(serialization_alias="totalPages")
    current_page: int = Field(serialization_alias="currentPage")
