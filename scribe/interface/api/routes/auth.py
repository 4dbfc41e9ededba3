"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status

from scribe.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from scribe.config import Settings
from scribe.interface.api.security import AUTH_COOKIE, authenticate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the JWT as an httponly cookie.

    Production is served cross-site over HTTPS, so it needs
    ``samesite="none"`` with ``secure``; development stays on lax/HTTP.
    """
    is_production = settings.environment == "production"

    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_hours * 60 * 60,
    )


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> RegisterResponse:
    """Create an account and log it in.

    Example:
        POST /auth/register
        {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "password": "analytical"
        }
    """
    result = await register_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    logger.info(f"Registered user {result.user.id}")
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with email and password.

    The token is returned in the body and also set as the auth_token cookie.
    """
    result = await login_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return result


@router.get("/profile", response_model=GetCurrentUserResponse)
async def get_profile(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user's profile."""
    return await authenticate(get_current_user_use_case, authorization, auth_token)
