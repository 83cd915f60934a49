"""PostgreSQL implementation of Article repository."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.repository import ArticleRepository
from blog.domain.value import ArticleId
from blog.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """Existence checks against the shared articles table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article exists."""
        stmt = select(exists().where(articles_table.c.id == article_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())
