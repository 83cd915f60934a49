"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CommentSettings
from blog.domain.event import DomainEventPublisher
from blog.domain.repository import ArticleRepository, CommentRepository
from blog.domain.service import (
    CommentCommandService,
    CommentFactory,
    CommentQueryService,
    JWTService,
)
from blog.util.di.base import ProviderBase


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

    @provide(scope=Scope.APP)
    def get_comment_factory(self, comment_settings: CommentSettings) -> CommentFactory:
        """Provide comment factory (stateless, shared)."""
        return CommentFactory(max_content_length=comment_settings.max_content_length)

    @provide
    def get_comment_command_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        event_publisher: DomainEventPublisher,
        comment_factory: CommentFactory,
        comment_settings: CommentSettings,
    ) -> CommentCommandService:
        """Provide comment write service."""
        return CommentCommandService(
            comment_repository=comment_repository,
            article_repository=article_repository,
            event_publisher=event_publisher,
            comment_factory=comment_factory,
            max_cascade_size=comment_settings.max_cascade_size,
            verify_article_exists=comment_settings.verify_article_exists,
        )

    @provide
    def get_comment_query_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentQueryService:
        """Provide comment read service."""
        return CommentQueryService(
            comment_repository=comment_repository,
            max_page_size=comment_settings.max_page_size,
        )
