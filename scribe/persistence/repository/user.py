"""PostgreSQL implementation of User repository."""

from typing import Iterable, List, Optional

import logfire
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import User
from scribe.domain.repository.user import UserRepository
from scribe.domain.value import Email, UserId
from scribe.persistence.error import escape_like, translate_errors
from scribe.persistence.mappers import row_to_user, user_to_dict
from scribe.persistence.tables import users_table

UNIQUE_EMAIL_CONSTRAINT = "uq_users_email"


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with translate_errors("user_repository.find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find several users in one query."""
        ids = list(user_ids)
        if not ids:
            return []

        with translate_errors("user_repository.find_by_ids"):
            stmt = select(users_table).where(users_table.c.id.in_(ids))
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        return [row_to_user(row._asdict()) for row in rows]

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        with translate_errors("user_repository.find_by_email"):
            stmt = select(users_table).where(users_table.c.email == email.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()

        return row_to_user(row._asdict()) if row else None

    async def find_ids_by_name(self, fragment: str) -> List[UserId]:
        """Find users whose first or last name contains a fragment."""
        with logfire.span("user_repository.find_ids_by_name", fragment=fragment):
            pattern = f"%{escape_like(fragment)}%"
            stmt = select(users_table.c.id).where(
                or_(
                    users_table.c.first_name.ilike(pattern, escape="\\"),
                    users_table.c.last_name.ilike(pattern, escape="\\"),
                )
            )

            with translate_errors("user_repository.find_ids_by_name"):
                result = await self.session.execute(stmt)
                ids = [UserId(row.id) for row in result.fetchall()]

            logfire.info("Users matched by name", count=len(ids))
            return ids

    async def create(self, user: User) -> User:
        """Insert a new user."""
        with logfire.span("user_repository.create", user_id=str(user.id)):
            stmt = users_table.insert().values(**user_to_dict(user)).returning(users_table)

            with translate_errors("user_repository.create", UNIQUE_EMAIL_CONSTRAINT):
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()

            return row_to_user(row._asdict())
