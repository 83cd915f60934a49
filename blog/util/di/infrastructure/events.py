"""Domain event infrastructure providers."""

from dishka import Scope, provide

from blog.adapter.event import InProcessEventPublisher
from blog.domain.event import DomainEventPublisher
from blog.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider using the in-process publisher.

    The publisher is APP-scoped so subscriptions made at startup apply
    to every request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_in_process_publisher(self) -> InProcessEventPublisher:
        """Provide the shared in-process publisher."""
        return InProcessEventPublisher()

    @provide(scope=Scope.APP)
    def get_event_publisher(
        self, publisher: InProcessEventPublisher
    ) -> DomainEventPublisher:
        """Expose the in-process publisher through the domain port."""
        return publisher
