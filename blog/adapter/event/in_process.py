"""In-process domain event publisher.

Handlers are awaited in subscription order inside the publishing request.
A failing handler is logged and counted but never fails the write that
produced the event; the comment is already flushed to the store (though not
necessarily committed) by the time events go out.
"""

from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Optional

import logfire

from blog.domain.event import DomainEvent, DomainEventPublisher

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class InProcessEventPublisher(DomainEventPublisher):
    """Dispatches events to handlers registered per event type."""

    def __init__(self, keep_history: bool = False) -> None:
        """Initialize publisher.

        Args:
            keep_history: Record every published event in ``history``
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(
            list
        )
        self._keep_history = keep_history
        self.history: list[DomainEvent] = []
        self.error_count = 0

    def subscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        """Register a handler for an event type (and its subclasses)."""
        self._handlers[event_type].append(handler)

    def events_of(
        self, event_type: Optional[type[DomainEvent]] = None
    ) -> list[DomainEvent]:
        """Recorded events, optionally filtered by type."""
        if event_type is None:
            return list(self.history)
        return [e for e in self.history if isinstance(e, event_type)]

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to every handler subscribed to its type."""
        if self._keep_history:
            self.history.append(event)

        logfire.info(
            "Domain event published",
            event_type=event.event_type,
            event_id=str(event.event_id),
            aggregate_id=event.aggregate_id,
        )

        for subscribed_type, handlers in list(self._handlers.items()):
            if not isinstance(event, subscribed_type):
                continue
            for handler in handlers:
                try:
                    await handler(event)
                except Exception as e:
                    self.error_count += 1
                    logfire.error(
                        "Domain event handler failed",
                        event_type=event.event_type,
                        event_id=str(event.event_id),
                        handler=getattr(handler, "__qualname__", repr(handler)),
                        error=str(e),
                    )
