"""Comment entity.

Comments are threaded discussions on articles with unlimited depth.
The tree is stored as an adjacency list: each reply points at its
direct parent through ``parent_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment.
    Replies can be nested with unlimited depth.

    - id: Assigned by the store on first save (None before that)
    - parent_id: Direct parent comment (None for top-level)
    - published_at: Set once at creation, never changes
    """

    id: Optional[CommentId] = None
    article_id: ArticleId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    published_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether the comment is attached directly to the article."""
        return self.parent_id is None

    @property
    def is_reply(self) -> bool:
        """Whether the comment replies to another comment."""
        return self.parent_id is not None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
