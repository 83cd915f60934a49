"""Comment query service.

Read-only access to comments. Nothing here writes to the store and
nothing is cached between calls; counts are always computed by the store.
"""

from typing import List, Optional

import logfire

from blog.domain.error import ValidationError
from blog.domain.model.comment import Comment
from blog.domain.model.thread import CommentThreadPreview
from blog.domain.repository import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId

from .base import Service

DEFAULT_REPLY_LIMIT = 3
DEFAULT_MAX_PAGE_SIZE = 100


class CommentQueryService(Service):
    """Domain service for comment reads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        """Initialize comment query service.

        Args:
            comment_repository: Comment repository
            max_page_size: Larger page sizes are clamped to this value
        """
        self.comment_repository = comment_repository
        self.max_page_size = max_page_size

    async def get_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_query_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.debug("Comment not found", comment_id=comment_id)
            return comment

    async def get_comments(
        self,
        article_id: ArticleId,
        parent_id: Optional[CommentId] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """List comments on an article, or the direct replies to one comment.

        Paging applies only when both ``page`` and ``size`` are given.

        Args:
            article_id: Article ID
            parent_id: Restrict to direct replies of this comment
            page: Zero-based page number
            size: Page size

        Returns:
            Matching comments
        """
        with logfire.span(
            "comment_query_service.get_comments",
            article_id=article_id,
            parent_id=parent_id,
            page=page,
            size=size,
        ):
            if page is not None and size is not None:
                size = self._check_page(page, size)
            else:
                page, size = None, None

            if parent_id is not None:
                comments = await self.comment_repository.find_by_parent_id(
                    parent_id, page, size
                )
            else:
                comments = await self.comment_repository.find_by_article_id(
                    article_id, page, size
                )
            logfire.info(
                "Comments retrieved",
                article_id=article_id,
                parent_id=parent_id,
                count=len(comments),
            )
            return comments

    async def get_top_level_comments(
        self, article_id: ArticleId, page: int, size: int
    ) -> List[Comment]:
        """List comments without a parent, newest first."""
        with logfire.span(
            "comment_query_service.get_top_level_comments",
            article_id=article_id,
            page=page,
            size=size,
        ):
            size = self._check_page(page, size)
            return await self.comment_repository.find_top_level_by_article_id(
                article_id, page, size
            )

    async def get_replies(
        self, parent_id: CommentId, page: int, size: int
    ) -> List[Comment]:
        """List the direct replies to a comment, newest first.

        Only one level is returned; replies to replies are fetched by
        calling this again with the reply's ID.
        """
        with logfire.span(
            "comment_query_service.get_replies",
            parent_id=parent_id,
            page=page,
            size=size,
        ):
            size = self._check_page(page, size)
            return await self.comment_repository.find_by_parent_id(
                parent_id, page, size
            )

    async def get_top_level_with_latest_replies(
        self,
        article_id: ArticleId,
        page: int,
        size: int,
        reply_limit: int = DEFAULT_REPLY_LIMIT,
    ) -> List[CommentThreadPreview]:
        """Page of top-level comments, each with a preview of its replies.

        Each entry carries the true number of direct replies and at most
        ``reply_limit`` of the newest ones. The cost is one count and at most
        one bounded fetch per top-level comment, bounded by ``size``.

        Args:
            article_id: Article ID
            page: Zero-based page number
            size: Number of top-level comments per page
            reply_limit: Most replies to include per top-level comment

        Returns:
            Thread previews in top-level order (newest first)

        Raises:
            ValidationError: If paging arguments or reply_limit are invalid
        """
        with logfire.span(
            "comment_query_service.get_top_level_with_latest_replies",
            article_id=article_id,
            page=page,
            size=size,
            reply_limit=reply_limit,
        ):
            size = self._check_page(page, size)
            if reply_limit < 0:
                raise ValidationError("Reply limit must not be negative")

            top_level = await self.comment_repository.find_top_level_by_article_id(
                article_id, page, size
            )

            previews: List[CommentThreadPreview] = []
            for comment in top_level:
                reply_count = await self.comment_repository.count_replies_by_parent_id(
                    comment.id
                )
                latest: List[Comment] = []
                if reply_count > 0 and reply_limit > 0:
                    latest = await self.comment_repository.find_by_parent_id(
                        comment.id, 0, reply_limit
                    )
                previews.append(
                    CommentThreadPreview(
                        comment=comment,
                        reply_count=reply_count,
                        latest_replies=tuple(latest[:reply_limit]),
                    )
                )

            logfire.info(
                "Thread previews retrieved",
                article_id=article_id,
                count=len(previews),
            )
            return previews

    async def get_comments_by_author(
        self, author_id: UserId, page: int, size: int
    ) -> List[Comment]:
        """List a user's comments across all articles, newest first."""
        with logfire.span(
            "comment_query_service.get_comments_by_author",
            author_id=author_id,
            page=page,
            size=size,
        ):
            size = self._check_page(page, size)
            return await self.comment_repository.find_by_author_id(
                author_id, page, size
            )

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count all comments on an article, replies included."""
        return await self.comment_repository.count_by_article_id(article_id)

    async def count_top_level(self, article_id: ArticleId) -> int:
        """Count top-level comments on an article."""
        return await self.comment_repository.count_top_level_by_article_id(article_id)

    async def count_replies(self, parent_id: CommentId) -> int:
        """Count direct replies to a comment."""
        return await self.comment_repository.count_replies_by_parent_id(parent_id)

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's comments."""
        return await self.comment_repository.count_by_author_id(author_id)

    def _check_page(self, page: int, size: int) -> int:
        """Validate paging arguments and return the effective page size."""
        if page < 0:
            raise ValidationError("Page number must not be negative")
        if size <= 0:
            raise ValidationError("Page size must be positive")
        return min(size, self.max_page_size)
