"""Delete comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentCommandService
from blog.domain.value import CommentId, UserId

from ..base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    removed_count: int  # The comment itself plus every reply below it


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_command_service: CommentCommandService) -> None:
        self.comment_command_service = comment_command_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the user doesn't own the comment
            CascadeLimitError: If the thread below it is too large
        """
        removed = await self.comment_command_service.delete_comment(
            comment_id=CommentId(request.comment_id),
            requesting_user_id=UserId(request.user_id),
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id, removed_count=len(removed)
        )
