"""PostgreSQL implementation of UserProfile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import UserProfile
from blog.domain.repository import UserProfileRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_user_profile
from blog.persistence.tables import users_table


class PostgresUserProfileRepository(UserProfileRepository):
    """PostgreSQL implementation of UserProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a user's profile by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user_profile(row._asdict()) if row else None
