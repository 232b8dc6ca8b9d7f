"""
User model - identity record. Never hard-deleted.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from skillloop.db.base import Base, IdTimestampMixin


class User(IdTimestampMixin, Base):
    """User entity. ``hashed_password`` never leaves the persistence layer."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(15), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
