"""Comment domain events."""

from blog.domain.event.base import DomainEvent
from blog.domain.value import ArticleId, CommentId, UserId


class CommentCreated(DomainEvent):
    """A comment or reply was published."""

    comment_id: CommentId
    article_id: ArticleId
    author_id: UserId
    is_reply: bool

    @property
    def aggregate_id(self) -> str:
        return str(self.comment_id)


class CommentUpdated(DomainEvent):
    """A comment's content was edited by its author."""

    comment_id: CommentId
    article_id: ArticleId
    author_id: UserId

    @property
    def aggregate_id(self) -> str:
        return str(self.comment_id)


class CommentDeleted(DomainEvent):
    """A comment and its whole reply subtree were removed.

    Only the requested root gets an event. ``removed_ids`` lists every
    comment actually removed by the delete (root included) so consumers can
    invalidate descendants without a separate event per node.
    """

    comment_id: CommentId
    article_id: ArticleId
    removed_ids: tuple[CommentId, ...] = ()

    @property
    def aggregate_id(self) -> str:
        return str(self.comment_id)
