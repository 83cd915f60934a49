"""In-memory comment repository for testing."""

from itertools import count
from typing import Callable, Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the SQL implementation's ordering: newest first with the ID as
    tie-breaker, except the article listing which is oldest first.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _select(
        self,
        predicate: Callable[[Comment], bool],
        newest_first: bool = True,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Comment]:
        comments = [c for c in self._comments.values() if predicate(c)]
        comments.sort(key=lambda c: (c.published_at, c.id), reverse=newest_first)

        # Paginate
        if page is None or size is None:
            return comments
        offset = page * size
        return comments[offset : offset + size]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_parent_id(
        self,
        parent_id: CommentId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Comment]:
        """Find direct replies to a comment."""
        return self._select(lambda c: c.parent_id == parent_id, page=page, size=size)

    async def find_by_article_id(
        self,
        article_id: ArticleId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Comment]:
        """Find all comments on an article."""
        return self._select(
            lambda c: c.article_id == article_id,
            newest_first=False,
            page=page,
            size=size,
        )

    async def find_top_level_by_article_id(
        self,
        article_id: ArticleId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Comment]:
        """Find top-level comments on an article."""
        return self._select(
            lambda c: c.article_id == article_id and c.parent_id is None,
            page=page,
            size=size,
        )

    async def find_by_author_id(
        self,
        author_id: UserId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> list[Comment]:
        """Find comments by a specific author."""
        return self._select(lambda c: c.author_id == author_id, page=page, size=size)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment, assigning an ID to new ones."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[comment.id] = comment
        return comment

    async def delete_by_id(self, comment_id: CommentId) -> bool:
        """Delete a comment if present."""
        return self._comments.pop(comment_id, None) is not None

    async def count_by_article_id(self, article_id: ArticleId) -> int:
        """Count all comments on an article."""
        return sum(1 for c in self._comments.values() if c.article_id == article_id)

    async def count_top_level_by_article_id(self, article_id: ArticleId) -> int:
        """Count top-level comments on an article."""
        return sum(
            1
            for c in self._comments.values()
            if c.article_id == article_id and c.parent_id is None
        )

    async def count_replies_by_parent_id(self, parent_id: CommentId) -> int:
        """Count direct replies to a comment."""
        return sum(1 for c in self._comments.values() if c.parent_id == parent_id)

    async def count_by_author_id(self, author_id: UserId) -> int:
        """Count comments by a specific author."""
        return sum(1 for c in self._comments.values() if c.author_id == author_id)
