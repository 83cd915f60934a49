"""Create comment use case."""

from pydantic import BaseModel

from blog.domain.repository import UserProfileRepository
from blog.domain.service import CommentCommandService
from blog.domain.value import ArticleId, CommentId, UserId

from ..base import BaseUseCase
from .common import CommentItem, author_item, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: int
    content: str
    author_id: int  # User ID from authenticated user
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to another comment."""

    def __init__(
        self,
        comment_command_service: CommentCommandService,
        user_profile_repository: UserProfileRepository,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_command_service: Comment write service
            user_profile_repository: Author profile lookups
        """
        self.comment_command_service = comment_command_service
        self.user_profile_repository = user_profile_repository

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the content is invalid
            NotFoundError: If the article or parent comment doesn't exist
            ConsistencyError: If the parent is on a different article
        """
        comment = await self.comment_command_service.create_comment(
            content=request.content,
            article_id=ArticleId(request.article_id),
            author_id=UserId(request.author_id),
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
        )

        profile = await self.user_profile_repository.find_by_id(comment.author_id)
        return CreateCommentResponse(
            comment=to_comment_item(comment, author_item(comment.author_id, profile))
        )
