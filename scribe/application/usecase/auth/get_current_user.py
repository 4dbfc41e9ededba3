"""Get current user use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.error import AuthenticationError, NotFoundError
from scribe.domain.model import User
from scribe.domain.service import JWTService, UserService
from scribe.domain.value import UserId
from scribe.util.jwt import JWTError


class UserProfile(BaseModel):
    """User profile as returned to clients (never includes the password hash)."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.root,
            created_at=user.created_at,
        )


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # JWT token, None when the client sent none


class GetCurrentUserResponse(UserProfile):
    """Get current user response."""


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Extract user_id from token
        3. Load user from database

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or its user no longer exists
        """
        if not request.token:
            raise AuthenticationError("Not authorized, no token")

        try:
            payload = self.jwt_service.verify_token(request.token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            raise AuthenticationError("Not authorized, token failed")

        try:
            user = await self.user_service.get_by_id(user_id)
        except NotFoundError:
            logfire.warn("Token for unknown user", user_id=str(user_id))
            raise AuthenticationError("Not authorized, user not found")

        return GetCurrentUserResponse.from_user(user)
