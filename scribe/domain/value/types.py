"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from scribe.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class PostState(str, Enum):
    """Publication state of a post.

    Drafts are visible only to their author.
    """

    DRAFT = "draft"
    PUBLISHED = "published"


class Email(RootValueObject[str]):
    """Normalised user email address (trimmed, lowercase)."""

    @field_validator("root", mode="before")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        """Trim, lowercase and check the address shape."""
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        v = v.strip().lower()
        if not _EMAIL_PATTERN.match(v) or len(v) > 255:
            raise ValueError("Email must be a valid email address")
        return v
