"""Register use case."""

import logfire
from pydantic import BaseModel

from scribe.domain.service import AuthService, JWTService

from .get_current_user import UserProfile


class RegisterRequest(BaseModel):
    """Register request."""

    first_name: str
    last_name: str
    email: str
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    token: str
    user: UserProfile


class RegisterUseCase:
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Create the account and log the new user in.

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the email is already registered
        """
        with logfire.span("register.execute"):
            user = await self.auth_service.register(
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                password=request.password,
            )
            token = self.jwt_service.create_token(str(user.id))

            logfire.info("User registered", user_id=str(user.id))
            return RegisterResponse(token=token, user=UserProfile.from_user(user))
