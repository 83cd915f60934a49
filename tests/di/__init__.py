"""Mock providers for testing."""

from .events import MockEventsProvider
from .persistence import MockPersistenceProvider
from .state import AppStateProvider
from .container import build_test_container

__all__ = [
    "AppStateProvider",
    "MockEventsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
