"""Login use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import AuthService, JWTService

from .get_current_user import UserProfile


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: UserProfile


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a token.

        Raises:
            AuthenticationError: If the email is unknown or the password wrong
        """
        with logfire.span("login.execute"):
            user = await self.auth_service.authenticate(request.email, request.password)
            token = self.jwt_service.create_token(str(user.id))

            return LoginResponse(token=token, user=UserProfile.from_user(user))
