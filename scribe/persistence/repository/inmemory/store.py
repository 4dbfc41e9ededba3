"""Shared state for the in-memory repositories."""

from scribe.domain.model import Post, User
from scribe.domain.value import PostId, UserId


class InMemoryStore:
    """Tables for the in-memory repositories.

    One store can back many repository instances, so data written in one
    request is visible to the next.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
