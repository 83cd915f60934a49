"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases translate request DTOs into domain calls and domain results
    into response DTOs for the presentation layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
