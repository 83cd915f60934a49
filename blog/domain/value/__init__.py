"""Domain value objects for the blog."""

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import ArticleId, CommentId, UserId

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    "UserId",
    # Base classes
    "ValueObject",
]
