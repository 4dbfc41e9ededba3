"""Unit tests for GetPublishedPostUseCase."""

from uuid import uuid4

import pytest

from scribe.application.usecase.post import (
    GetPublishedPostRequest,
    GetPublishedPostUseCase,
)
from scribe.domain.error import NotFoundError
from scribe.domain.repository import PostRepository, UserRepository
from scribe.domain.value import PostState
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPublishedPost:
    """Tests for reading a single published post."""

    @pytest.mark.asyncio
    async def test_read_returns_post_with_author_and_counts_it(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user("Grace", "Hopper"))
        post = await post_repo.create(make_post(author.id, read_count=4))
        use_case = await unit_env.get(GetPublishedPostUseCase)

        # Act
        response = await use_case.execute(GetPublishedPostRequest(post_id=str(post.id)))

        # Assert
        assert response.id == str(post.id)
        assert response.read_count == 5
        assert response.author.first_name == "Grace"
        assert response.author.last_name == "Hopper"

    @pytest.mark.asyncio
    async def test_repeated_reads_accumulate(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        post = await post_repo.create(make_post(author.id))
        use_case = await unit_env.get(GetPublishedPostUseCase)
        request = GetPublishedPostRequest(post_id=str(post.id))

        # Act
        for _ in range(3):
            response = await use_case.execute(request)

        # Assert
        assert response.read_count == 3
        stored = await post_repo.find_by_id(post.id)
        assert stored.read_count == 3

    @pytest.mark.asyncio
    async def test_draft_is_not_found_even_for_its_author(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        post = await post_repo.create(make_post(author.id, state=PostState.DRAFT))
        use_case = await unit_env.get(GetPublishedPostUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetPublishedPostRequest(post_id=str(post.id)))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", ["nope", "123", str(uuid4())])
    async def test_malformed_or_unknown_id_is_not_found(self, unit_env, post_id):
        use_case = await unit_env.get(GetPublishedPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPublishedPostRequest(post_id=post_id))
