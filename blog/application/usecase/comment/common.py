"""Response models shared by the comment use cases."""

from datetime import datetime
from typing import Iterable, Optional

import logfire
from pydantic import BaseModel, Field, computed_field

from blog.domain.model import Comment, UserProfile
from blog.domain.repository import UserProfileRepository
from blog.domain.value import UserId

UNKNOWN_USER_NAME = "Unknown user"


class AuthorItem(BaseModel):
    """Comment author as shown to readers."""

    user_id: int
    display_name: str
    avatar_url: str | None = None


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    article_id: int
    content: str
    author: AuthorItem
    parent_id: int | None
    is_top_level: bool
    published_at: datetime
    updated_at: datetime
    # Only set for entries of the thread preview
    reply_count: int | None = None
    latest_replies: list["CommentItem"] | None = None


class CommentListResponse(BaseModel):
    """One page of comments."""

    comments: list[CommentItem]
    total_count: int
    page: int
    size: int

    @computed_field
    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total_count

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 0


class PageRequest(BaseModel):
    """Paging fields shared by list requests."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, gt=0)


def author_item(user_id: UserId, profile: Optional[UserProfile]) -> AuthorItem:
    """Build an author item, falling back to a placeholder for unknown users."""
    if profile is None:
        return AuthorItem(user_id=user_id, display_name=UNKNOWN_USER_NAME)
    return AuthorItem(
        user_id=profile.id,
        display_name=profile.display_name,
        avatar_url=profile.avatar_url,
    )


async def resolve_authors(
    user_profile_repository: UserProfileRepository, comments: Iterable[Comment]
) -> dict[UserId, AuthorItem]:
    """Look up each distinct author once.

    Args:
        user_profile_repository: Profile lookups
        comments: Comments whose authors are needed

    Returns:
        Author items keyed by user ID
    """
    authors: dict[UserId, AuthorItem] = {}
    for comment in comments:
        if comment.author_id in authors:
            continue
        profile = await user_profile_repository.find_by_id(comment.author_id)
        if profile is None:
            logfire.warn(
                "Comment author not found",
                user_id=comment.author_id,
                comment_id=comment.id,
            )
        authors[comment.author_id] = author_item(comment.author_id, profile)
    return authors


def to_comment_item(comment: Comment, author: AuthorItem) -> CommentItem:
    """Convert a comment to its response item."""
    return CommentItem(
        comment_id=comment.id,
        article_id=comment.article_id,
        content=comment.content,
        author=author,
        parent_id=comment.parent_id,
        is_top_level=comment.is_top_level,
        published_at=comment.published_at,
        updated_at=comment.updated_at,
    )
