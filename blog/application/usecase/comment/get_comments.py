"""Get comments use case."""

from typing import Optional

from pydantic import BaseModel, Field

from blog.domain.repository import UserProfileRepository
from blog.domain.service import CommentQueryService
from blog.domain.value import ArticleId, CommentId

from ..base import BaseUseCase
from .common import CommentListResponse, resolve_authors, to_comment_item


class GetCommentsRequest(BaseModel):
    """Get comments request.

    Without ``page`` and ``size`` every matching comment is returned.
    """

    article_id: int
    parent_id: Optional[int] = None  # Only direct replies to this comment
    page: Optional[int] = Field(default=None, ge=0)
    size: Optional[int] = Field(default=None, gt=0)


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the comments of an article."""

    def __init__(
        self,
        comment_query_service: CommentQueryService,
        user_profile_repository: UserProfileRepository,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_query_service: Comment read service
            user_profile_repository: Author profile lookups
        """
        self.comment_query_service = comment_query_service
        self.user_profile_repository = user_profile_repository

    async def execute(self, request: GetCommentsRequest) -> CommentListResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Comments on the article (oldest first), or the direct replies
            to ``parent_id`` (newest first)
        """
        article_id = ArticleId(request.article_id)
        parent_id = (
            CommentId(request.parent_id) if request.parent_id is not None else None
        )
        paged = request.page is not None and request.size is not None

        comments = await self.comment_query_service.get_comments(
            article_id=article_id,
            parent_id=parent_id,
            page=request.page if paged else None,
            size=request.size if paged else None,
        )

        if parent_id is not None:
            total_count = await self.comment_query_service.count_replies(parent_id)
        else:
            total_count = await self.comment_query_service.count_by_article(
                article_id
            )

        authors = await resolve_authors(self.user_profile_repository, comments)
        items = [to_comment_item(c, authors[c.author_id]) for c in comments]

        if paged:
            page = request.page
            size = min(request.size, self.comment_query_service.max_page_size)
        else:
            page, size = 0, max(total_count, len(items))

        return CommentListResponse(
            comments=items, total_count=total_count, page=page, size=size
        )
