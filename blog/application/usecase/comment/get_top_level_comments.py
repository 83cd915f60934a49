"""Get top-level comments use case."""

from itertools import chain
from typing import Optional

from pydantic import BaseModel, Field

from blog.domain.repository import UserProfileRepository
from blog.domain.service import CommentQueryService
from blog.domain.value import ArticleId

from ..base import BaseUseCase
from .common import CommentListResponse, resolve_authors, to_comment_item

DEFAULT_REPLY_LIMIT = 3


class GetTopLevelCommentsRequest(BaseModel):
    """Get top-level comments request."""

    article_id: int
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, gt=0)
    # Newest replies per comment; the configured default when omitted
    reply_limit: Optional[int] = Field(default=None, ge=0)


class GetTopLevelCommentsUseCase(BaseUseCase):
    """Use case for the first screen of an article's discussion.

    Returns a page of top-level comments, newest first. Each item carries
    its total reply count and the newest few replies.
    """

    def __init__(
        self,
        comment_query_service: CommentQueryService,
        user_profile_repository: UserProfileRepository,
        default_reply_limit: int = DEFAULT_REPLY_LIMIT,
    ) -> None:
        """Initialize get top-level comments use case.

        Args:
            comment_query_service: Comment read service
            user_profile_repository: Author profile lookups
            default_reply_limit: Replies per comment when the request has no limit
        """
        self.comment_query_service = comment_query_service
        self.user_profile_repository = user_profile_repository
        self.default_reply_limit = default_reply_limit

    async def execute(self, request: GetTopLevelCommentsRequest) -> CommentListResponse:
        """Execute get top-level comments flow.

        Args:
            request: Get top-level comments request

        Returns:
            Page of thread previews; ``total_count`` counts top-level
            comments only
        """
        article_id = ArticleId(request.article_id)
        reply_limit = (
            request.reply_limit
            if request.reply_limit is not None
            else self.default_reply_limit
        )
        previews = await self.comment_query_service.get_top_level_with_latest_replies(
            article_id, request.page, request.size, reply_limit
        )
        total_count = await self.comment_query_service.count_top_level(article_id)

        authors = await resolve_authors(
            self.user_profile_repository,
            chain.from_iterable(
                (preview.comment, *preview.latest_replies) for preview in previews
            ),
        )

        items = []
        for preview in previews:
            item = to_comment_item(preview.comment, authors[preview.comment.author_id])
            item.reply_count = preview.reply_count
            item.latest_replies = [
                to_comment_item(reply, authors[reply.author_id])
                for reply in preview.latest_replies
            ]
            items.append(item)

        return CommentListResponse(
            comments=items,
            total_count=total_count,
            page=request.page,
            size=min(request.size, self.comment_query_service.max_page_size),
        )
