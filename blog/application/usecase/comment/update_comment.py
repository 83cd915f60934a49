"""Update comment use case."""

from pydantic import BaseModel

from blog.domain.repository import UserProfileRepository
from blog.domain.service import CommentCommandService
from blog.domain.value import CommentId, UserId

from ..base import BaseUseCase
from .common import CommentItem, author_item, to_comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)
    content: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_command_service: CommentCommandService,
        user_profile_repository: UserProfileRepository,
    ) -> None:
        self.comment_command_service = comment_command_service
        self.user_profile_repository = user_profile_repository

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the user doesn't own the comment
            ValidationError: If the new content is invalid
        """
        comment = await self.comment_command_service.update_comment(
            comment_id=CommentId(request.comment_id),
            requesting_user_id=UserId(request.user_id),
            content=request.content,
        )

        profile = await self.user_profile_repository.find_by_id(comment.author_id)
        return UpdateCommentResponse(
            comment=to_comment_item(comment, author_item(comment.author_id, profile))
        )
