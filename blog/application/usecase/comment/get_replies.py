"""Get replies use case."""

from pydantic import BaseModel, Field

from blog.domain.repository import UserProfileRepository
from blog.domain.service import CommentQueryService
from blog.domain.value import CommentId

from ..base import BaseUseCase
from .common import CommentListResponse, resolve_authors, to_comment_item


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    parent_id: int
    page: int = Field(default=0, ge=0)
    size: int = Field(default=5, gt=0)


class GetRepliesUseCase(BaseUseCase):
    """Use case for paging through the direct replies to a comment.

    Used for "load more replies" after the thread preview.
    """

    def __init__(
        self,
        comment_query_service: CommentQueryService,
        user_profile_repository: UserProfileRepository,
    ) -> None:
        self.comment_query_service = comment_query_service
        self.user_profile_repository = user_profile_repository

    async def execute(self, request: GetRepliesRequest) -> CommentListResponse:
        parent_id = CommentId(request.parent_id)
        replies = await self.comment_query_service.get_replies(
            parent_id, request.page, request.size
        )
        total_count = await self.comment_query_service.count_replies(parent_id)

        authors = await resolve_authors(self.user_profile_repository, replies)
        return CommentListResponse(
            comments=[to_comment_item(r, authors[r.author_id]) for r in replies],
            total_count=total_count,
            page=request.page,
            size=min(request.size, self.comment_query_service.max_page_size),
        )
