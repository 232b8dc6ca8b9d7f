"""
Skill endpoints - public browsing plus owner-only writes.
Route order matters: /search and /user/{id} are declared before /{skill_id}.
"""

from fastapi import APIRouter, Query, status

from skillloop.core.dependencies import CurrentUserId
from skillloop.db.repositories.skill_repository import SkillRepository
from skillloop.db.session import DbSession
from skillloop.schemas.common import (
    MessageResponse,
    SkillEnvelope,
    SkillListEnvelope,
    SkillMessageEnvelope,
)
from skillloop.schemas.skill import SkillCreate, SkillUpdate
from skillloop.services.skill_service import SkillService

router = APIRouter()


def _get_skill_service(session: DbSession) -> SkillService:
    return SkillService(SkillRepository(session))


@router.get("", response_model=SkillListEnvelope)
async def list_skills(
    session: DbSession,
    category: str | None = None,
    experience_level: str | None = Query(None, alias="experienceLevel"),
):
    """Active skills, newest first. REST: GET /skills?category=Music&experienceLevel=Expert."""
    skills = await _get_skill_service(session).list_skills(category, experience_level)
    return SkillListEnvelope(count=len(skills), skills=skills)


@router.get("/search", response_model=SkillListEnvelope)
async def search_skills(session: DbSession, query: str | None = None):
    skills = await _get_skill_service(session).search(query)
    return SkillListEnvelope(count=len(skills), skills=skills)


@router.get("/user/{user_id}", response_model=SkillListEnvelope)
async def list_user_skills(session: DbSession, user_id: str):
    skills = await _get_skill_service(session).list_by_user(user_id)
    return SkillListEnvelope(count=len(skills), skills=skills)


@router.get("/{skill_id}", response_model=SkillEnvelope)
async def get_skill(session: DbSession, skill_id: str):
    skill = await _get_skill_service(session).get_by_id(skill_id)
    return SkillEnvelope(skill=skill)


@router.post("", response_model=SkillMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_skill(session: DbSession, data: SkillCreate, user_id: CurrentUserId):
    """Create a skill owned by the caller."""
    skill = await _get_skill_service(session).create(user_id, data)
    return SkillMessageEnvelope(message="Skill created successfully", skill=skill)


@router.put("/{skill_id}", response_model=SkillMessageEnvelope)
async def update_skill(session: DbSession, skill_id: str, data: SkillUpdate, user_id: CurrentUserId):
    skill = await _get_skill_service(session).update(skill_id, user_id, data)
    return SkillMessageEnvelope(message="Skill updated successfully", skill=skill)


@router.delete("/{skill_id}", response_model=MessageResponse)
async def delete_skill(session: DbSession, skill_id: str, user_id: CurrentUserId):
    """Soft delete: the skill disappears from listings but stays referenced by requests."""
    await _get_skill_service(session).soft_delete(skill_id, user_id)
    return MessageResponse(message="Skill deleted successfully")
