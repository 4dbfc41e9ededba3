"""In-memory user repository for testing."""

from typing import Iterable, Optional

from scribe.domain.error import ConflictError
from scribe.domain.model.user import User
from scribe.domain.repository.user import UserRepository
from scribe.domain.value import Email, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_ids_by_name(self, fragment: str) -> list[UserId]:
        """Find users whose first or last name contains a fragment."""
        needle = fragment.lower()
        return [
            user.id
            for user in self._users.values()
            if needle in user.first_name.lower() or needle in user.last_name.lower()
        ]

    async def create(self, user: User) -> User:
        """Insert a new user."""
        if await self.find_by_email(user.email):
            raise ConflictError(f"Email already registered: {user.email}")
        self._users[user.id] = user
        return user
