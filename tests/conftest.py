"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from blog.domain.model import Comment
from blog.domain.value import ArticleId, CommentId, UserId

# Keep spans local: nothing is exported or printed during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: int | None,
    article_id: int = 1,
    author_id: int = 10,
    parent_id: int | None = None,
    content: str = "A comment",
    minutes_ago: int = 0,
) -> Comment:
    """Helper function to build comments directly, bypassing the services.

    Args:
        comment_id: Comment ID (None for an unsaved comment)
        article_id: Article ID
        author_id: Author user ID
        parent_id: Parent comment ID for replies
        content: Comment text
        minutes_ago: How long ago the comment was published

    Returns:
        Comment domain model
    """
    published_at = datetime.now() - timedelta(minutes=minutes_ago)
    return Comment(
        id=CommentId(comment_id) if comment_id is not None else None,
        article_id=ArticleId(article_id),
        author_id=UserId(author_id),
        content=content,
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        published_at=published_at,
        updated_at=published_at,
    )
