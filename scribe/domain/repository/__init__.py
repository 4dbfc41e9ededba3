"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from scribe.domain.repository.post import (
    PostOrdering,
    PostQuery,
    PostRepository,
    PostSortField,
    SortDirection,
)
from scribe.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "PostQuery",
    "PostOrdering",
    "PostSortField",
    "SortDirection",
]
