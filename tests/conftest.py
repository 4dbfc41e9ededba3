"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from scribe.domain.model import Post, User
from scribe.domain.service.reading_time import estimate_reading_time
from scribe.domain.value import Email, PostId, PostState, UserId
from scribe.util.password import hash_password

# Cheap hashing and test defaults; real environment values still win
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__PASSWORD_HASH_ITERATIONS", "1000")

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

TEST_PASSWORD = "secret123"


def make_user(
    first_name: str = "Ada",
    last_name: str = "Lovelace",
    email: str | None = None,
    password: str = TEST_PASSWORD,
) -> User:
    """Helper function to build a test user with a real password hash."""
    return User(
        id=UserId(uuid4()),
        first_name=first_name,
        last_name=last_name,
        email=Email(email or f"{uuid4().hex[:8]}@example.com"),
        password_hash=hash_password(password, 1000),
    )


def make_post(
    author_id: UserId,
    title: str = "Test Post",
    body: str = "Some words to read",
    state: PostState = PostState.PUBLISHED,
    tags: list[str] | None = None,
    read_count: int = 0,
    created_at: datetime | None = None,
) -> Post:
    """Helper function to build a test post with a consistent reading time."""
    created = created_at or datetime.now(timezone.utc)
    return Post(
        id=PostId(uuid4()),
        title=title,
        description="",
        body=body,
        tags=tags or [],
        author_id=author_id,
        state=state,
        read_count=read_count,
        reading_time=estimate_reading_time(body),
        created_at=created,
        updated_at=created,
    )
