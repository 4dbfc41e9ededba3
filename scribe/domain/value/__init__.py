"""Domain value objects."""

from scribe.domain.value.identifiers import PostId, UserId
from scribe.domain.value.types import Email, PostState

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "Email",
    "PostState",
]
