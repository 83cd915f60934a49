"""In-memory user profile repository for testing."""

from typing import Optional

from blog.domain.model.user import UserProfile
from blog.domain.repository.user_profile import UserProfileRepository
from blog.domain.value import UserId


class InMemoryUserProfileRepository(UserProfileRepository):
    """In-memory implementation of UserProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, UserProfile] = {}

    def add(self, profile: UserProfile) -> None:
        """Store a profile."""
        self._profiles[profile.id] = profile

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a user's profile by ID."""
        return self._profiles.get(user_id)
