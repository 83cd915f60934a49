"""Domain event publisher implementations."""

from .in_process import EventHandler, InProcessEventPublisher

__all__ = [
    "EventHandler",
    "InProcessEventPublisher",
]
