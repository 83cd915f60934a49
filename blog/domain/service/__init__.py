"""Domain services."""

from .base import Service
from .comment_command_service import CommentCommandService
from .comment_factory import CommentFactory
from .comment_query_service import CommentQueryService
from .jwt_service import JWTService

__all__ = [
    "CommentCommandService",
    "CommentFactory",
    "CommentQueryService",
    "JWTService",
    "Service",
]
