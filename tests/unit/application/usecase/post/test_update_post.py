"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from scribe.application.usecase.post import UpdatePostRequest, UpdatePostUseCase
from scribe.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from scribe.domain.repository import PostRepository, UserRepository
from scribe.domain.value import PostState
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePost:
    """Tests for editing posts."""

    @pytest.mark.asyncio
    async def test_only_present_fields_change(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        post = await post_repo.create(
            make_post(author.id, title="Old", tags=["a"], read_count=3)
        )
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act
        response = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id), user_id=str(author.id), title="New"
            )
        )

        # Assert
        assert response.title == "New"
        assert response.body == post.body
        assert response.tags == ["a"]
        assert response.read_count == 3
        assert response.state == PostState.PUBLISHED

    @pytest.mark.asyncio
    async def test_body_change_recomputes_reading_time(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        post = await post_repo.create(make_post(author.id, body="tiny"))
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act
        response = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id),
                user_id=str(author.id),
                body=" ".join(["word"] * 1000),
            )
        )

        # Assert
        assert response.reading_time == 5

    @pytest.mark.asyncio
    async def test_state_can_be_changed_with_other_fields(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        post = await post_repo.create(make_post(author.id, state=PostState.DRAFT))
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act
        response = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id),
                user_id=str(author.id),
                description="Now live",
                state=PostState.PUBLISHED,
            )
        )

        # Assert
        assert response.state == PostState.PUBLISHED
        assert response.description == "Now live"

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden_before_title_conflict(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        intruder = await user_repo.create(make_user("Eve", "Smith"))
        await post_repo.create(make_post(author.id, title="Taken"))
        post = await post_repo.create(make_post(author.id, title="Target"))
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id), user_id=str(intruder.id), title="Taken"
                )
            )

    @pytest.mark.asyncio
    async def test_title_conflict_for_author(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        await post_repo.create(make_post(author.id, title="Taken"))
        post = await post_repo.create(make_post(author.id, title="Target"))
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id), user_id=str(author.id), title="Taken"
                )
            )

    @pytest.mark.asyncio
    async def test_blank_title_is_invalid(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        post = await post_repo.create(make_post(author.id))
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdatePostRequest(post_id=str(post.id), user_id=str(author.id), title="  ")
            )

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(uuid4()), user_id=str(uuid4()), title="Anything"
                )
            )
