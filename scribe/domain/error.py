"""Domain layer errors."""

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError) -> "ValidationError":
        """Wrap the first failure of a pydantic validation error."""
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        message = first["msg"].removeprefix("Value error, ")
        return cls(f"{location}: {message}" if location else message)


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class AuthenticationError(DomainError):
    """Raised when a caller cannot be identified or their credentials are wrong."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised when the backing store fails in a way callers cannot fix."""

    pass
