"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Column names follow
the existing schema (``user_id``, ``created_at``), which differs from the
domain vocabulary (``author_id``, ``published_at``).
"""

from typing import Any, Dict

from blog.domain.model import Comment, UserProfile
from blog.domain.value import ArticleId, CommentId, UserId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(int(row["id"])),
        article_id=ArticleId(int(row["article_id"])),
        author_id=UserId(int(row["user_id"])),
        content=row["content"],
        parent_id=CommentId(int(row["parent_id"]))
        if row.get("parent_id") is not None
        else None,
        published_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The ID is left out for unsaved comments so the database assigns one.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    values: Dict[str, Any] = {
        "content": comment.content,
        "article_id": comment.article_id,
        "user_id": comment.author_id,
        "parent_id": comment.parent_id,
        "created_at": comment.published_at,
        "updated_at": comment.updated_at,
    }
    if comment.id is not None:
        values["id"] = comment.id
    return values


def row_to_user_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile read model.

    Args:
        row: Database row as dict

    Returns:
        UserProfile read model
    """
    return UserProfile(
        id=UserId(int(row["id"])),
        display_name=row["username"],
        avatar_url=row.get("avatar_url"),
        profile_url=row.get("profile_url"),
    )
