"""Integration tests for PostgresPostRepository.

Run against a migrated PostgreSQL database:

    SCRIBE_INTEGRATION=1 DATABASE__URL=postgresql+asyncpg://... pytest -m integration
"""

import os
from uuid import uuid4

import pytest

from scribe.domain.error import ConflictError
from scribe.domain.repository import PostQuery, PostRepository, UserRepository
from scribe.domain.value import PostState
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("SCRIBE_INTEGRATION") != "1",
        reason="needs PostgreSQL (set SCRIBE_INTEGRATION=1)",
    ),
]

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def create_author(integration_env):
    user_repo = await integration_env.get(UserRepository)
    return await user_repo.create(make_user(email=f"{uuid4().hex}@example.com"))


class TestPostRepositoryIntegration:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_round_trip(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = await create_author(integration_env)
        post = make_post(author.id, title=f"Round trip {uuid4().hex}", tags=["a", "b"])

        # Act
        await post_repo.create(post)
        found = await post_repo.find_by_id(post.id)

        # Assert
        assert found is not None
        assert found.title == post.title
        assert found.tags == ["a", "b"]
        assert found.state == PostState.PUBLISHED
        assert found.author_id == author.id

    @pytest.mark.asyncio
    async def test_duplicate_title_raises_conflict(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = await create_author(integration_env)
        await post_repo.create(make_post(author.id, title="Unique per author"))

        # Act & Assert
        with pytest.raises(ConflictError):
            await post_repo.create(make_post(author.id, title="Unique per author"))

        # The session is still usable after the failed insert
        assert await post_repo.find_by_author_and_title(author.id, "Unique per author")

    @pytest.mark.asyncio
    async def test_tag_filter_matches_any(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = await create_author(integration_env)
        tag = uuid4().hex
        await post_repo.create(make_post(author.id, title="One", tags=[tag]))
        await post_repo.create(make_post(author.id, title="Two", tags=["other"]))

        # Act
        query = PostQuery(
            author_ids=frozenset({author.id}), tags=frozenset({tag, "missing"})
        )
        posts = await post_repo.find(query, limit=10, offset=0)

        # Assert
        assert [p.title for p in posts] == ["One"]
        assert await post_repo.count(query) == 1

    @pytest.mark.asyncio
    async def test_title_filter_escapes_wildcards(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = await create_author(integration_env)
        await post_repo.create(make_post(author.id, title="100% done"))
        await post_repo.create(make_post(author.id, title="100 done"))

        # Act
        posts = await post_repo.find(
            PostQuery(author_ids=frozenset({author.id}), title_contains="0%"),
            limit=10,
            offset=0,
        )

        # Assert
        assert [p.title for p in posts] == ["100% done"]

    @pytest.mark.asyncio
    async def test_increment_read_count(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = await create_author(integration_env)
        live = await post_repo.create(make_post(author.id, title="Live"))
        draft = await post_repo.create(
            make_post(author.id, title="Draft", state=PostState.DRAFT)
        )

        # Act
        first = await post_repo.increment_read_count(live.id)
        second = await post_repo.increment_read_count(live.id)
        skipped = await post_repo.increment_read_count(draft.id)

        # Assert
        assert first.read_count == 1
        assert second.read_count == 2
        assert skipped is None

    @pytest.mark.asyncio
    async def test_update_keeps_read_count(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = await create_author(integration_env)
        post = await post_repo.create(make_post(author.id, title="Before"))
        await post_repo.increment_read_count(post.id)

        # Act
        updated = await post_repo.update(
            post.model_copy(update={"title": "After", "read_count": 0})
        )

        # Assert
        assert updated.title == "After"
        assert updated.read_count == 1
