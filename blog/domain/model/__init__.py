"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment
from blog.domain.model.thread import CommentThreadPreview
from blog.domain.model.user import UserProfile

__all__ = [
    "Comment",
    "CommentThreadPreview",
    "UserProfile",
]
