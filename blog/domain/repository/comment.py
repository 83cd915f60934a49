"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import ArticleId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.

    Paged finders take a zero-based ``page`` and a ``size``; when either is
    None the full result is returned.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_parent_id(
        self,
        parent_id: CommentId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find direct replies to a comment, newest first.

        Args:
            parent_id: The parent comment ID
            page: Zero-based page number
            size: Page size

        Returns:
            List of direct child comments
        """
        pass

    @abstractmethod
    async def find_by_article_id(
        self,
        article_id: ArticleId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find all comments on an article (replies included), oldest first.

        Args:
            article_id: The article ID
            page: Zero-based page number
            size: Page size

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_top_level_by_article_id(
        self,
        article_id: ArticleId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find comments without a parent on an article, newest first.

        Args:
            article_id: The article ID
            page: Zero-based page number
            size: Page size

        Returns:
            List of top-level comments
        """
        pass

    @abstractmethod
    async def find_by_author_id(
        self,
        author_id: UserId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find comments written by a user, newest first.

        Args:
            author_id: The author's user ID
            page: Zero-based page number
            size: Page size

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Comments without an ID are inserted and receive one from the store.

        Args:
            comment: The comment to save

        Returns:
            The saved comment, with its ID populated
        """
        pass

    @abstractmethod
    async def delete_by_id(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete) if it exists.

        Deleting a comment that is already gone is not an error, which keeps
        cascade deletes safe to retry.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed, False if it did not exist
        """
        pass

    @abstractmethod
    async def count_by_article_id(self, article_id: ArticleId) -> int:
        """Count all comments on an article, replies included."""
        pass

    @abstractmethod
    async def count_top_level_by_article_id(self, article_id: ArticleId) -> int:
        """Count comments without a parent on an article."""
        pass

    @abstractmethod
    async def count_replies_by_parent_id(self, parent_id: CommentId) -> int:
        """Count direct replies to a comment."""
        pass

    @abstractmethod
    async def count_by_author_id(self, author_id: UserId) -> int:
        """Count comments written by a user."""
        pass
