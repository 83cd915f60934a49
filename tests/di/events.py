"""Mock event providers for testing."""

from dishka import Scope, provide

from blog.adapter.event import InProcessEventPublisher
from blog.domain.event import DomainEventPublisher
from blog.util.di.infrastructure.events import EventsProvider


class MockEventsProvider(EventsProvider):
    """Recording publisher, fresh for every test.

    Tests read published events back through ``InProcessEventPublisher.history``.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_in_process_publisher(self) -> InProcessEventPublisher:
        """Provide a publisher that keeps every event."""
        return InProcessEventPublisher(keep_history=True)

    @provide(scope=Scope.REQUEST)
    def get_event_publisher(
        self, publisher: InProcessEventPublisher
    ) -> DomainEventPublisher:
        """Expose the recording publisher through the domain port."""
        return publisher
