"""Unit tests for CreatePostUseCase."""

import pytest

from scribe.application.usecase.post import CreatePostRequest, CreatePostUseCase
from scribe.domain.error import ConflictError, ValidationError
from scribe.domain.repository import UserRepository
from scribe.domain.value import PostState
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for creating posts."""

    @pytest.mark.asyncio
    async def test_create_post_defaults_to_draft(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                author_id=str(author.id),
                title="First",
                body="one two three",
                tags=["intro"],
            )
        )

        # Assert
        assert response.state == PostState.DRAFT
        assert response.author == str(author.id)
        assert response.read_count == 0
        assert response.reading_time == 1
        assert response.tags == ["intro"]
        assert response.description == ""

    @pytest.mark.asyncio
    async def test_create_post_published_on_request(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                author_id=str(author.id),
                title="Live",
                body="text",
                state=PostState.PUBLISHED,
            )
        )

        # Assert
        assert response.state == PostState.PUBLISHED

    @pytest.mark.asyncio
    async def test_duplicate_title_is_rejected(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        use_case = await unit_env.get(CreatePostUseCase)
        request = CreatePostRequest(author_id=str(author.id), title="Same", body="x")
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_missing_body_is_rejected(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.create(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(author_id=str(author.id), title="Empty", body=" ")
            )
