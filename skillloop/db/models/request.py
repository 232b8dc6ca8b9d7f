"""
Request model - an exchange proposal between a requester and a skill owner.
"""

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillloop.db.base import Base, IdTimestampMixin

if TYPE_CHECKING:
    from skillloop.db.models.skill import Skill
    from skillloop.db.models.user import User


class RequestStatus(str, enum.Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    COMPLETED = "Completed"


class Request(IdTimestampMixin, Base):
    """Request entity. ``to_user_id`` is copied from the skill owner at creation."""

    __tablename__ = "requests"
    __table_args__ = (
        # At most one pending request per requester and skill
        Index(
            "uq_requests_pending",
            "skill_id",
            "from_user_id",
            unique=True,
            sqlite_where=text("status = 'Pending'"),
            postgresql_where=text("status = 'Pending'"),
        ),
    )

    skill_id: Mapped[str] = mapped_column(ForeignKey("skills.id"), nullable=False, index=True)
    from_user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    to_user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[RequestStatus] = mapped_column(
        Enum(RequestStatus, name="request_status", values_callable=lambda e: [m.value for m in e]),
        default=RequestStatus.PENDING,
        nullable=False,
        index=True,
    )

    skill: Mapped["Skill"] = relationship("Skill")
    from_user: Mapped["User"] = relationship("User", foreign_keys=[from_user_id])
    to_user: Mapped["User"] = relationship("User", foreign_keys=[to_user_id])

    def __repr__(self) -> str:
        return f"<Request(id={self.id}, status={self.status})>"
