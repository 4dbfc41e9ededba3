"""User domain service."""

from typing import Iterable

import logfire

from scribe.domain.error import NotFoundError
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID.

        Unknown IDs are left out of the result.
        """
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_users_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email.root, user_id=str(user.id))
            else:
                logfire.info("User not found", email=email.root)
            return user

    async def create(self, user: User) -> User:
        """Store a new user.

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.create", user_id=str(user.id)):
            saved = await self.user_repository.create(user)
            logfire.info("User created", user_id=str(saved.id))
            return saved
