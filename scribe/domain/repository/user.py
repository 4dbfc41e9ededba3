"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from scribe.domain.model.user import User
from scribe.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users in one lookup.

        Args:
            user_ids: User IDs to load (unknown IDs are skipped)

        Returns:
            The users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's normalised email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_ids_by_name(self, fragment: str) -> list[UserId]:
        """Find users whose first or last name contains a fragment.

        Matching is case-insensitive and literal (no pattern syntax).

        Args:
            fragment: Name fragment to look for

        Returns:
            IDs of matching users
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The stored user

        Raises:
            ConflictError: If the email is already registered
        """
        pass
