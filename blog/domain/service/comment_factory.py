"""Comment factory.

Builds new comments and content revisions, enforcing the structural rules
every comment must satisfy. Lookups (does the parent exist, does it belong
to the same article) are the command service's job; the factory only
certifies the fields it is given.
"""

from datetime import datetime
from typing import Optional

import logfire

from blog.domain.error import ValidationError
from blog.domain.model.comment import Comment
from blog.domain.value import ArticleId, CommentId, UserId

from .base import Service

DEFAULT_MAX_CONTENT_LENGTH = 1000


class CommentFactory(Service):
    """Validated construction of top-level comments and replies."""

    def __init__(self, max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH) -> None:
        """Initialize comment factory.

        Args:
            max_content_length: Maximum content length after trimming
        """
        self.max_content_length = max_content_length

    def validate_content(self, content: Optional[str]) -> str:
        """Check comment content and return it trimmed.

        Args:
            content: Raw content as submitted

        Returns:
            Content with surrounding whitespace removed

        Raises:
            ValidationError: If content is missing, blank or too long
        """
        if content is None or not content.strip():
            raise ValidationError("Comment content must not be empty")
        trimmed = content.strip()
        if len(trimmed) > self.max_content_length:
            raise ValidationError(
                f"Comment content must be at most {self.max_content_length} characters"
            )
        return trimmed

    def create_top_level(
        self,
        content: Optional[str],
        article_id: Optional[ArticleId],
        author_id: Optional[UserId],
    ) -> Comment:
        """Create a comment attached directly to an article.

        Args:
            content: Comment text
            article_id: Article being commented on
            author_id: Comment author

        Returns:
            Unsaved comment (no ID yet)

        Raises:
            ValidationError: If content or identifiers are invalid
        """
        trimmed = self.validate_content(content)
        self.require(article_id, "Article ID")
        self.require(author_id, "Author ID")
        return self._build(trimmed, article_id, author_id, parent_id=None)

    def create_reply(
        self,
        content: Optional[str],
        article_id: Optional[ArticleId],
        author_id: Optional[UserId],
        parent_id: Optional[CommentId],
    ) -> Comment:
        """Create a reply to an existing comment.

        The caller must already have checked that the parent exists and
        belongs to ``article_id``.

        Args:
            content: Reply text
            article_id: Article the thread belongs to
            author_id: Reply author
            parent_id: Comment being replied to

        Returns:
            Unsaved reply (no ID yet)

        Raises:
            ValidationError: If content or identifiers are invalid
        """
        trimmed = self.validate_content(content)
        self.require(article_id, "Article ID")
        self.require(author_id, "Author ID")
        self.require(parent_id, "Parent comment ID")
        return self._build(trimmed, article_id, author_id, parent_id=parent_id)

    def revise_content(self, comment: Comment, content: Optional[str]) -> Comment:
        """Return a copy of ``comment`` with new content.

        Everything except the content and ``updated_at`` is carried over, so
        a revision can never move a comment to another parent or article.

        Raises:
            ValidationError: If the new content is invalid
        """
        trimmed = self.validate_content(content)
        return comment.model_copy(
            update={"content": trimmed, "updated_at": datetime.now()}
        )

    def _build(
        self,
        content: str,
        article_id: ArticleId,
        author_id: UserId,
        parent_id: Optional[CommentId],
    ) -> Comment:
        now = datetime.now()
        comment = Comment(
            id=None,
            article_id=article_id,
            author_id=author_id,
            content=content,
            parent_id=parent_id,
            published_at=now,
            updated_at=now,
        )
        logfire.debug(
            "Comment built",
            article_id=article_id,
            author_id=author_id,
            parent_id=parent_id,
            content_length=len(content),
        )
        return comment

    @staticmethod
    def require(value: Optional[int], label: str) -> None:
        """Raise ValidationError if a required identifier is missing."""
        if value is None:
            raise ValidationError(f"{label} is required")
