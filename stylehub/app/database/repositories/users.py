# app/database/repositories/users.py
"""Repository for user-related database operations."""

from typing import Optional

from sqlalchemy import select

from app.models.database.user import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for managing user accounts."""

    def __init__(self, session):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        query = select(User).where(User.email == email.strip().lower())
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        conditions = [User.email == email.strip().lower()]
        if exclude_id is not None:
            conditions.append(User.id != exclude_id)
        return await self.exists(*conditions)
