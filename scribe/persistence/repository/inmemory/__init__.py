"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
