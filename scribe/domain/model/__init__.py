"""Domain model entities."""

from scribe.domain.model.post import Post, is_post_owner
from scribe.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "is_post_owner",
]
