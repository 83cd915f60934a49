"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.user import UserProfile
from blog.domain.value import UserId


class UserProfileRepository(ABC):
    """Resolves comment authors to display profiles."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a user's profile.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass
