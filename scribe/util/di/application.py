"""Application layer DI providers."""

from dishka import Scope, provide

from scribe.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from scribe.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPublishedPostUseCase,
    ListMyPostsUseCase,
    ListPublishedPostsUseCase,
    UpdatePostStateUseCase,
    UpdatePostUseCase,
)
from scribe.config import PaginationSettings
from scribe.domain.service import (
    AuthService,
    JWTService,
    PostQueryBuilder,
    PostService,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_published_posts_use_case(
        self,
        query_builder: PostQueryBuilder,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListPublishedPostsUseCase:
        """Provide public listing use case."""
        return ListPublishedPostsUseCase(
            query_builder=query_builder,
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_published_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPublishedPostUseCase:
        """Provide get published post use case."""
        return GetPublishedPostUseCase(
            post_service=post_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_posts_use_case(
        self,
        query_builder: PostQueryBuilder,
        post_service: PostService,
        pagination_settings: PaginationSettings,
    ) -> ListMyPostsUseCase:
        """Provide owner listing use case."""
        return ListMyPostsUseCase(
            query_builder=query_builder,
            post_service=post_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_state_use_case(
        self, post_service: PostService
    ) -> UpdatePostStateUseCase:
        """Provide update post state use case."""
        return UpdatePostStateUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)
