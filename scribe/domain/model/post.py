"""Post aggregate root.

A post is a blog entry owned by exactly one author. Drafts are private to
their author; published posts are readable by everyone.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from scribe.domain.model.common import DomainModel
from scribe.domain.value import PostId, PostState, UserId


MAX_TITLE_LENGTH = 300
MAX_TAG_LENGTH = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Post(DomainModel):
    """Post aggregate root.

    ``reading_time`` is derived from ``body`` and must be recomputed by
    whoever changes the body (see PostService).
    """

    id: PostId
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str = ""
    body: str
    tags: list[str] = Field(default_factory=list)
    author_id: UserId
    state: PostState = PostState.DRAFT
    read_count: int = Field(default=0, ge=0)
    reading_time: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Trim surrounding whitespace."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Body must contain at least one non-whitespace character."""
        if not v.strip():
            raise ValueError("Body must not be empty")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalise_tags(cls, v: list[str]) -> list[str]:
        """Trim each tag and drop blank ones, keeping insertion order."""
        if isinstance(v, list):
            v = [t.strip() if isinstance(t, str) else t for t in v]
            v = [t for t in v if t != ""]
            for tag in v:
                if isinstance(tag, str) and len(tag) > MAX_TAG_LENGTH:
                    raise ValueError(
                        f"Tags must be at most {MAX_TAG_LENGTH} characters"
                    )
            return v
        return v


def is_post_owner(post: Post, caller_id: UserId) -> bool:
    """Whether ``caller_id`` may modify ``post``.

    Used by update, state change and delete alike.
    """
    return post.author_id == caller_id
