"""Unit tests for AuthService."""

import pytest

from scribe.domain.error import AuthenticationError, ConflictError, ValidationError
from scribe.domain.service import AuthService
from scribe.util.password import verify_password
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_hashes_password_and_normalises_email(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        user = await auth_service.register(
            first_name=" Ada ",
            last_name="Lovelace",
            email="  Ada@Example.COM ",
            password="analytical",
        )

        # Assert
        assert user.first_name == "Ada"
        assert user.email.root == "ada@example.com"
        assert user.password_hash != "analytical"
        assert verify_password("analytical", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("Ada", "Lovelace", "ada@example.com", "secret1")

        # Act & Assert
        with pytest.raises(ConflictError):
            await auth_service.register("Ada", "L", "ADA@example.com", "secret2")

    @pytest.mark.asyncio
    async def test_short_password_is_invalid(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="at least 6"):
            await auth_service.register("Ada", "Lovelace", "ada@example.com", "12345")

    @pytest.mark.asyncio
    async def test_malformed_email_is_invalid(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth_service.register("Ada", "Lovelace", "not-an-email", "secret1")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "Ada", "Lovelace", "ada@example.com", "secret1"
        )

        # Act
        user = await auth_service.authenticate("ADA@example.com", "secret1")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_identically(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("Ada", "Lovelace", "ada@example.com", "secret1")

        # Act
        with pytest.raises(AuthenticationError) as wrong_password:
            await auth_service.authenticate("ada@example.com", "wrong-one")
        with pytest.raises(AuthenticationError) as unknown_email:
            await auth_service.authenticate("nobody@example.com", "secret1")

        # Assert
        assert str(wrong_password.value) == "Invalid credentials"
        assert str(unknown_email.value) == str(wrong_password.value)
