"""Caller authentication for protected routes."""

from scribe.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

AUTH_COOKIE = "auth_token"


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the caller's JWT from a Bearer header, falling back to the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


async def authenticate(
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
    auth_token: str | None,
) -> GetCurrentUserResponse:
    """Resolve the calling user.

    Raises:
        AuthenticationError: If no valid token was sent
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=extract_token(authorization, auth_token))
    )
