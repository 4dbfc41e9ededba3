"""User aggregate root."""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from scribe.domain.model.common import DomainModel
from scribe.domain.value import Email, UserId


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` never leaves the domain/persistence layers; responses
    are built from explicit display fields.
    """

    id: UserId
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: Email
    password_hash: str
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, v: str) -> str:
        """Trim surrounding whitespace."""
        return v.strip() if isinstance(v, str) else v
