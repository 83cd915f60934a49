"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    GetTopLevelCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.config import CommentSettings
from blog.domain.repository import UserProfileRepository
from blog.domain.service import CommentCommandService, CommentQueryService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment write use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_command_service: CommentCommandService,
        user_profile_repository: UserProfileRepository,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_command_service=comment_command_service,
            user_profile_repository=user_profile_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_command_service: CommentCommandService,
        user_profile_repository: UserProfileRepository,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_command_service=comment_command_service,
            user_profile_repository=user_profile_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_command_service: CommentCommandService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_command_service=comment_command_service)

    # Comment read use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_query_service: CommentQueryService,
        user_profile_repository: UserProfileRepository,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_query_service=comment_query_service,
            user_profile_repository=user_profile_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self,
        comment_query_service: CommentQueryService,
        user_profile_repository: UserProfileRepository,
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_query_service=comment_query_service,
            user_profile_repository=user_profile_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_top_level_comments_use_case(
        self,
        comment_query_service: CommentQueryService,
        user_profile_repository: UserProfileRepository,
        comment_settings: CommentSettings,
    ) -> GetTopLevelCommentsUseCase:
        """Provide get top-level comments (thread preview) use case."""
        return GetTopLevelCommentsUseCase(
            comment_query_service=comment_query_service,
            user_profile_repository=user_profile_repository,
            default_reply_limit=comment_settings.default_reply_limit,
        )
