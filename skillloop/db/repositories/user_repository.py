"""
User repository - encapsulates all user data access.
"""

from sqlalchemy import or_, select

from skillloop.db.models.user import User
from skillloop.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with lookups by unique fields."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email - used for authentication."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_email_or_phone(self, email: str, phone: str) -> User | None:
        """First user holding either identifier. Registration duplicate check."""
        result = await self.session.execute(
            select(User).where(or_(User.email == email, User.phone == phone)).limit(1)
        )
        return result.scalar_one_or_none()

    async def phone_taken_by_other(self, phone: str, user_id: str) -> bool:
        result = await self.session.execute(
            select(User.id).where(User.phone == phone, User.id != user_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
