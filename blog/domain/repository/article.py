"""Article repository interface.

Articles are managed by the content service. Comments only need to know
whether an article exists.
"""

from abc import ABC, abstractmethod

from blog.domain.value import ArticleId


class ArticleRepository(ABC):
    """Read-only view of articles used by the comment subsystem."""

    @abstractmethod
    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article exists.

        Args:
            article_id: The article ID

        Returns:
            True if the article exists, False otherwise
        """
        pass
