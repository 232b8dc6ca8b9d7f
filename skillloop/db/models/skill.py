"""
Skill model - an offer posted by one user. Deletion is a soft flag flip.
"""

import enum
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillloop.db.base import Base, IdTimestampMixin

if TYPE_CHECKING:
    from skillloop.db.models.user import User


class ExperienceLevel(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class Skill(IdTimestampMixin, Base):
    """Skill entity. Inactive skills stay resolvable for historical requests."""

    __tablename__ = "skills"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    experience_level: Mapped[ExperienceLevel] = mapped_column(
        Enum(ExperienceLevel, name="experience_level", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    # {"days": [...], "time_slots": [...]}
    availability: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False, index=True)

    owner: Mapped["User"] = relationship("User")

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, title={self.title})>"
