"""
Request repository - exchange request queries with read-time joins.
"""

from sqlalchemy import or_, select
from sqlalchemy.orm import selectinload

from skillloop.db.models.request import Request, RequestStatus
from skillloop.db.repositories.base_repository import BaseRepository

SENT = "sent"
RECEIVED = "received"


class RequestRepository(BaseRepository[Request]):
    """Request-specific queries. Related skill and users are batch-loaded by id."""

    def __init__(self, session):
        super().__init__(session, Request)

    def _with_relations(self):
        return (
            select(Request)
            .options(
                selectinload(Request.skill),
                selectinload(Request.from_user),
                selectinload(Request.to_user),
            )
            .execution_options(populate_existing=True)
        )

    async def get_with_relations(self, id: str) -> Request | None:
        result = await self.session.execute(self._with_relations().where(Request.id == id))
        return result.scalar_one_or_none()

    async def find_pending(self, skill_id: str, from_user_id: str) -> Request | None:
        result = await self.session.execute(
            select(Request).where(
                Request.skill_id == skill_id,
                Request.from_user_id == from_user_id,
                Request.status == RequestStatus.PENDING,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        user_id: str,
        *,
        type: str | None = None,
        status: RequestStatus | None = None,
    ) -> list[Request]:
        """Requests the user sent, received, or either (default). Newest first."""
        stmt = self._with_relations()
        if type == SENT:
            stmt = stmt.where(Request.from_user_id == user_id)
        elif type == RECEIVED:
            stmt = stmt.where(Request.to_user_id == user_id)
        else:
            stmt = stmt.where(or_(Request.from_user_id == user_id, Request.to_user_id == user_id))
        if status:
            stmt = stmt.where(Request.status == status)
        result = await self.session.execute(stmt.order_by(Request.created_at.desc()))
        return list(result.scalars().all())

    async def list_for_skill(self, skill_id: str) -> list[Request]:
        """All requests against a skill, with the requester loaded."""
        result = await self.session.execute(
            select(Request)
            .options(selectinload(Request.from_user))
            .execution_options(populate_existing=True)
            .where(Request.skill_id == skill_id)
            .order_by(Request.created_at.desc())
        )
        return list(result.scalars().all())
