"""
Skill repository - skill queries with owner eager loading.
Only "active" queries filter on is_active; lookups by id do not, so
soft-deleted skills still resolve for historical requests.
"""

from sqlalchemy import func, or_, select
from sqlalchemy.orm import selectinload

from skillloop.db.models.skill import ExperienceLevel, Skill
from skillloop.db.repositories.base_repository import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    """Skill-specific queries. Uses selectinload to batch-fetch owners (no N+1)."""

    def __init__(self, session):
        super().__init__(session, Skill)

    def _with_owner(self):
        return (
            select(Skill)
            .options(selectinload(Skill.owner))
            .execution_options(populate_existing=True)
        )

    async def get_with_owner(self, id: str) -> Skill | None:
        result = await self.session.execute(self._with_owner().where(Skill.id == id))
        return result.scalar_one_or_none()

    async def list_active(
        self,
        *,
        category: str | None = None,
        experience_level: ExperienceLevel | None = None,
    ) -> list[Skill]:
        """Active skills, newest first, optionally filtered."""
        stmt = self._with_owner().where(Skill.is_active.is_(True))
        if category:
            stmt = stmt.where(Skill.category == category)
        if experience_level:
            stmt = stmt.where(Skill.experience_level == experience_level)
        result = await self.session.execute(stmt.order_by(Skill.created_at.desc()))
        return list(result.scalars().all())

    async def list_active_for_user(self, user_id: str) -> list[Skill]:
        result = await self.session.execute(
            self._with_owner()
            .where(Skill.user_id == user_id, Skill.is_active.is_(True))
            .order_by(Skill.created_at.desc())
        )
        return list(result.scalars().all())

    async def search_active(self, query: str) -> list[Skill]:
        """Case-insensitive substring match on title/description/category.

        PostgreSQL ranks by full-text relevance; other backends fall back to
        newest first.
        """
        stmt = self._with_owner().where(
            Skill.is_active.is_(True),
            or_(
                Skill.title.icontains(query, autoescape=True),
                Skill.description.icontains(query, autoescape=True),
                Skill.category.icontains(query, autoescape=True),
            ),
        )
        if self.session.bind.dialect.name == "postgresql":
            document = func.to_tsvector(
                "english",
                func.concat_ws(" ", Skill.title, Skill.description, Skill.category),
            )
            rank = func.ts_rank(document, func.plainto_tsquery("english", query))
            stmt = stmt.order_by(rank.desc(), Skill.created_at.desc())
        else:
            stmt = stmt.order_by(Skill.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
