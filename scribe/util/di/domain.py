"""Domain layer DI providers."""

from dishka import Scope, provide

from scribe.config import AuthSettings
from scribe.domain.repository import PostRepository, UserRepository
from scribe.domain.service import (
    AuthService,
    JWTService,
    PostQueryBuilder,
    PostService,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide email/password authentication domain service."""
        return AuthService(user_service=user_service, auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_post_query_builder(self, user_repository: UserRepository) -> PostQueryBuilder:
        """Provide listing query builder."""
        return PostQueryBuilder(user_repository=user_repository)
