"""Unit tests for LoginUseCase."""

import pytest

from scribe.application.usecase.auth import LoginRequest, LoginUseCase
from scribe.domain.error import AuthenticationError
from scribe.domain.repository import UserRepository
from scribe.domain.service import JWTService
from tests.conftest import TEST_PASSWORD, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLogin:
    """Tests for email/password login."""

    @pytest.mark.asyncio
    async def test_login_issues_token(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(make_user(email="grace@example.com"))
        use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            LoginRequest(email="Grace@Example.com", password=TEST_PASSWORD)
        )

        # Assert
        assert response.user.id == str(user.id)
        assert jwt_service.verify_token(response.token).user_id == str(user.id)

    @pytest.mark.asyncio
    async def test_wrong_password_fails(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.create(make_user(email="grace@example.com"))
        use_case = await unit_env.get(LoginUseCase)

        # Act & Assert
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await use_case.execute(
                LoginRequest(email="grace@example.com", password="not-it")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["nobody@example.com", "not-an-email"])
    async def test_unknown_or_malformed_email_fails(self, unit_env, email):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await use_case.execute(LoginRequest(email=email, password=TEST_PASSWORD))
