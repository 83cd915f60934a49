"""Domain events."""

from blog.domain.event.base import DomainEvent
from blog.domain.event.comment import CommentCreated, CommentDeleted, CommentUpdated
from blog.domain.event.publisher import DomainEventPublisher

__all__ = [
    "CommentCreated",
    "CommentDeleted",
    "CommentUpdated",
    "DomainEvent",
    "DomainEventPublisher",
]
