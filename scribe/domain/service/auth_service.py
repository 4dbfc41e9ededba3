"""Authentication domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from scribe.config import AuthSettings
from scribe.domain.error import AuthenticationError, ConflictError, ValidationError
from scribe.domain.model import User
from scribe.domain.value import Email, UserId
from scribe.util.password import hash_password, verify_password

from .base import Service
from .user_service import UserService

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class AuthService(Service):
    """Domain service for email/password accounts.

    Tokens are issued separately by JWTService once a user is known.
    """

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            user_service: User service
            auth_settings: Authentication settings (hash work factor)
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def register(
        self, first_name: str, last_name: str, email: str, password: str
    ) -> User:
        """Create an account.

        Args:
            first_name: Given name
            last_name: Family name
            email: Login email, stored normalised
            password: Plain-text password, at least six characters

        Returns:
            The new user

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the email is already registered
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        try:
            user = User(
                id=UserId(uuid4()),
                first_name=first_name,
                last_name=last_name,
                email=Email(email),
                password_hash=hash_password(
                    password, self.auth_settings.password_hash_iterations
                ),
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        with logfire.span("auth_service.register", user_id=str(user.id)):
            if await self.user_service.get_user_by_email(user.email):
                raise ConflictError("User already exists")
            return await self.user_service.create(user)

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Unknown emails and wrong passwords fail identically.

        Raises:
            AuthenticationError: If the credentials do not match an account
        """
        try:
            normalised = Email(email)
        except PydanticValidationError:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        with logfire.span("auth_service.authenticate", email=normalised.root):
            user = await self.user_service.get_user_by_email(normalised)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Login rejected", email=normalised.root)
                raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

            logfire.info("Login succeeded", user_id=str(user.id))
            return user
