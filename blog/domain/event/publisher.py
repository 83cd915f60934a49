"""Domain event publisher interface."""

from abc import ABC, abstractmethod

from blog.domain.event.base import DomainEvent


class DomainEventPublisher(ABC):
    """Publishes domain events to downstream consumers.

    Implementations live in the adapter layer.

    Events are published from inside the request's unit of work: the
    change is flushed but not yet committed. If the commit then fails the
    write rolls back while subscribers have already seen the event, so
    delivery is at most once and may run ahead of the commit. Consumers
    that need committed state must re-read it rather than trust the event.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish a single event.

        Args:
            event: The event to publish
        """
        pass

    async def publish_all(self, *events: DomainEvent) -> None:
        """Publish events in order.

        Args:
            events: Events to publish
        """
        for event in events:
            await self.publish(event)
