"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import Select, asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Only portable SQL is used, so the same class also runs against SQLite
    in tests.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _paginate(stmt: Select, page: Optional[int], size: Optional[int]) -> Select:
        if page is None or size is None:
            return stmt
        return stmt.limit(size).offset(page * size)

    @staticmethod
    def _newest_first(stmt: Select) -> Select:
        # ID breaks ties between comments published in the same instant
        return stmt.order_by(
            desc(comments_table.c.created_at), desc(comments_table.c.id)
        )

    async def _fetch(self, stmt: Select) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def _count(self, *conditions) -> int:
        stmt = select(func.count()).select_from(comments_table).where(*conditions)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_parent_id(
        self,
        parent_id: CommentId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find direct replies to a comment, newest first."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)
        stmt = self._paginate(self._newest_first(stmt), page, size)
        return await self._fetch(stmt)

    async def find_by_article_id(
        self,
        article_id: ArticleId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find all comments on an article, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .order_by(asc(comments_table.c.created_at), asc(comments_table.c.id))
        )
        return await self._fetch(self._paginate(stmt, page, size))

    async def find_top_level_by_article_id(
        self,
        article_id: ArticleId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find top-level comments on an article, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        stmt = self._paginate(self._newest_first(stmt), page, size)
        return await self._fetch(stmt)

    async def find_by_author_id(
        self,
        author_id: UserId,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first."""
        stmt = select(comments_table).where(comments_table.c.user_id == author_id)
        stmt = self._paginate(self._newest_first(stmt), page, size)
        return await self._fetch(stmt)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        values = comment_to_dict(comment)

        existing = (
            await self.find_by_id(comment.id) if comment.id is not None else None
        )

        if existing:
            # parent_id, article_id and authorship never change after creation
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(content=values["content"], updated_at=values["updated_at"])
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return await self.find_by_id(comment.id) or comment

        result = await self.session.execute(comments_table.insert().values(**values))
        await self.session.flush()

        new_id = CommentId(int(result.inserted_primary_key[0]))
        return comment.model_copy(update={"id": new_id})

    async def delete_by_id(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete) if it exists."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_article_id(self, article_id: ArticleId) -> int:
        """Count all comments on an article."""
        return await self._count(comments_table.c.article_id == article_id)

    async def count_top_level_by_article_id(self, article_id: ArticleId) -> int:
        """Count top-level comments on an article."""
        return await self._count(
            comments_table.c.article_id == article_id,
            comments_table.c.parent_id.is_(None),
        )

    async def count_replies_by_parent_id(self, parent_id: CommentId) -> int:
        """Count direct replies to a comment."""
        return await self._count(comments_table.c.parent_id == parent_id)

    async def count_by_author_id(self, author_id: UserId) -> int:
        """Count comments by a specific author."""
        return await self._count(comments_table.c.user_id == author_id)
