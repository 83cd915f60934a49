"""PostgreSQL repository implementations."""

from blog.persistence.repository.article import PostgresArticleRepository
from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.user import PostgresUserProfileRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresUserProfileRepository",
]
