"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .pagination import Pagination, paginate, parse_limit, parse_page
from .post_query import EMPTY_RESULT, EmptyResult, PostFilters, PostQueryBuilder, QueryMode
from .post_service import PostService, parse_post_id
from .reading_time import estimate_reading_time
from .user_service import UserService

__all__ = [
    "AuthService",
    "EMPTY_RESULT",
    "EmptyResult",
    "JWTService",
    "Pagination",
    "PostFilters",
    "PostQueryBuilder",
    "PostService",
    "QueryMode",
    "Service",
    "UserService",
    "estimate_reading_time",
    "paginate",
    "parse_limit",
    "parse_page",
    "parse_post_id",
]
