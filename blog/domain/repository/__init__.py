"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.article import ArticleRepository
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.user_profile import UserProfileRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "UserProfileRepository",
]
