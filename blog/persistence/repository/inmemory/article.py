"""In-memory article repository for testing."""

from blog.domain.repository.article import ArticleRepository
from blog.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._article_ids: set[ArticleId] = set()

    def add(self, article_id: ArticleId) -> None:
        """Register an article as existing."""
        self._article_ids.add(article_id)

    def remove(self, article_id: ArticleId) -> None:
        self._article_ids.discard(article_id)

    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article exists."""
        return article_id in self._article_ids
