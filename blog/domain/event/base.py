"""Base class for domain events."""

from abc import abstractmethod
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import Field

from blog.domain.model.common import DomainModel


class DomainEvent(DomainModel):
    """Something that happened in the domain.

    Events are immutable records published once the change they describe
    has been flushed to the store, inside the same unit of work. Consumers
    (cache invalidation, search indexing, notifications) subscribe through
    the ``DomainEventPublisher``.
    """

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=datetime.now)
    version: int = 1

    @property
    def event_type(self) -> str:
        return type(self).__name__

    @property
    @abstractmethod
    def aggregate_id(self) -> str:
        """Identifier of the aggregate the event is about."""
