"""Thread preview read model."""

from pydantic import Field

from blog.domain.model.comment import Comment
from blog.domain.value import ValueObject


class CommentThreadPreview(ValueObject):
    """A top-level comment with a bounded preview of its replies.

    ``reply_count`` is the true number of direct replies, while
    ``latest_replies`` holds at most the requested number of the newest
    ones. Clients use the difference to decide whether to offer a
    "load more replies" action.
    """

    comment: Comment
    reply_count: int = Field(ge=0)
    latest_replies: tuple[Comment, ...] = ()

    @property
    def has_more_replies(self) -> bool:
        return self.reply_count > len(self.latest_replies)
