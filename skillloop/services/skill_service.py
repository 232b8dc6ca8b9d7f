"""
Skill service - business logic for skill offers.
Design: ownership checks live here; endpoints stay thin.
"""

import logging

from skillloop.core.errors import BadRequestError, ForbiddenError, NotFoundError
from skillloop.db.models.skill import ExperienceLevel, Skill
from skillloop.db.repositories.skill_repository import SkillRepository
from skillloop.schemas.skill import (
    Availability,
    AvailabilityInput,
    SkillCreate,
    SkillDetailResponse,
    SkillResponse,
    SkillUpdate,
)
from skillloop.schemas.user import UserBrief, UserDetail
from skillloop.services.common import parse_id

logger = logging.getLogger(__name__)


def _availability_to_doc(availability: AvailabilityInput | None) -> dict:
    if availability is None:
        return {"days": [], "time_slots": []}
    return {"days": availability.days or [], "time_slots": availability.time_slots or []}


def skill_to_response(skill: Skill, detail: bool = False) -> SkillResponse:
    """Map model to API response with the owner projection (wider for detail views)."""
    model, owner = (SkillDetailResponse, UserDetail) if detail else (SkillResponse, UserBrief)
    return model(
        id=skill.id,
        user_id=skill.user_id,
        user=owner.model_validate(skill.owner),
        category=skill.category,
        title=skill.title,
        description=skill.description,
        experience_level=skill.experience_level,
        availability=Availability.model_validate(skill.availability or {}),
        is_active=skill.is_active,
        created_at=skill.created_at,
        updated_at=skill.updated_at,
    )


def _parse_level(value: str | None) -> ExperienceLevel | None:
    if not value:
        return None
    try:
        return ExperienceLevel(value)
    except ValueError:
        raise BadRequestError("Invalid experience level")


class SkillService:
    """Handles all skill use cases: CRUD, soft delete and search."""

    def __init__(self, skill_repo: SkillRepository):
        self.skill_repo = skill_repo

    async def create(self, owner_id: str, data: SkillCreate) -> SkillResponse:
        skill = Skill(
            user_id=owner_id,
            category=data.category,
            title=data.title,
            description=data.description,
            experience_level=data.experience_level,
            availability=_availability_to_doc(data.availability),
            is_active=True,
        )
        skill = await self.skill_repo.add(skill)
        logger.info("User %s created skill %s", owner_id, skill.id)
        # Reload with owner loaded to avoid lazy load in async context
        skill = await self.skill_repo.get_with_owner(skill.id)
        return skill_to_response(skill)

    async def list_skills(
        self, category: str | None = None, experience_level: str | None = None
    ) -> list[SkillResponse]:
        skills = await self.skill_repo.list_active(
            category=category or None,
            experience_level=_parse_level(experience_level),
        )
        return [skill_to_response(s) for s in skills]

    async def get_by_id(self, id: str) -> SkillDetailResponse:
        skill = await self.skill_repo.get_with_owner(parse_id(id, "skill"))
        if not skill or not skill.is_active:
            raise NotFoundError("Skill not found")
        return skill_to_response(skill, detail=True)

    async def list_by_user(self, user_id: str) -> list[SkillResponse]:
        skills = await self.skill_repo.list_active_for_user(parse_id(user_id, "user"))
        return [skill_to_response(s) for s in skills]

    async def _get_owned(self, id: str, requester_id: str, action: str) -> Skill:
        skill = await self.skill_repo.get_by_id(parse_id(id, "skill"))
        if not skill:
            raise NotFoundError("Skill not found")
        if skill.user_id != requester_id:
            raise ForbiddenError(f"You are not authorized to {action} this skill")
        return skill

    async def update(self, id: str, requester_id: str, data: SkillUpdate) -> SkillResponse:
        """Apply only the supplied fields. Values were re-validated by the payload rules."""
        skill = await self._get_owned(id, requester_id, "update")
        changes = data.model_dump(exclude_unset=True)
        for field in ("category", "title", "description", "experience_level"):
            if changes.get(field) is not None:
                setattr(skill, field, getattr(data, field))
        if "availability" in changes:
            skill.availability = _availability_to_doc(data.availability)
        await self.skill_repo.save(skill)
        logger.info("User %s updated skill %s", requester_id, skill.id)
        skill = await self.skill_repo.get_with_owner(skill.id)
        return skill_to_response(skill)

    async def soft_delete(self, id: str, requester_id: str) -> None:
        """Mark inactive; the row stays so existing requests still resolve it."""
        skill = await self._get_owned(id, requester_id, "delete")
        skill.is_active = False
        await self.skill_repo.save(skill)
        logger.info("User %s deactivated skill %s", requester_id, skill.id)

    async def search(self, query: str | None) -> list[SkillResponse]:
        query = (query or "").strip()
        if not query:
            raise BadRequestError("Search query is required")
        skills = await self.skill_repo.search_active(query)
        return [skill_to_response(s) for s in skills]
