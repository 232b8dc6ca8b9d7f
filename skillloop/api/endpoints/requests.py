"""
Exchange request endpoints. Every route requires a bearer token.
"""

from fastapi import APIRouter, status

from skillloop.core.dependencies import CurrentUserId
from skillloop.db.repositories.request_repository import RequestRepository
from skillloop.db.repositories.skill_repository import SkillRepository
from skillloop.db.session import DbSession
from skillloop.schemas.common import (
    MessageResponse,
    RequestEnvelope,
    RequestListEnvelope,
    RequestMessageEnvelope,
    SkillRequestListEnvelope,
)
from skillloop.schemas.request import RequestCreate, StatusUpdate
from skillloop.services.request_service import RequestService

router = APIRouter()


def _get_request_service(session: DbSession) -> RequestService:
    return RequestService(RequestRepository(session), SkillRepository(session))


@router.get("", response_model=RequestListEnvelope)
async def list_my_requests(
    session: DbSession,
    user_id: CurrentUserId,
    status: str | None = None,
    type: str | None = None,
):
    """Requests the caller sent and/or received. type = sent | received | both (default)."""
    requests = await _get_request_service(session).list_mine(user_id, status=status, type=type)
    return RequestListEnvelope(count=len(requests), requests=requests)


@router.get("/skill/{skill_id}", response_model=SkillRequestListEnvelope)
async def list_skill_requests(session: DbSession, skill_id: str, user_id: CurrentUserId):
    """All requests against one of the caller's skills."""
    requests = await _get_request_service(session).list_for_skill(skill_id, user_id)
    return SkillRequestListEnvelope(count=len(requests), requests=requests)


@router.get("/{request_id}", response_model=RequestEnvelope)
async def get_request(session: DbSession, request_id: str, user_id: CurrentUserId):
    request = await _get_request_service(session).get_by_id(request_id)
    return RequestEnvelope(request=request)


@router.post("", response_model=RequestMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_request(session: DbSession, data: RequestCreate, user_id: CurrentUserId):
    request = await _get_request_service(session).create(user_id, data)
    return RequestMessageEnvelope(message="Request sent successfully", request=request)


@router.patch("/{request_id}/status", response_model=RequestMessageEnvelope)
async def update_request_status(
    session: DbSession, request_id: str, data: StatusUpdate, user_id: CurrentUserId
):
    """Accept / reject (receiver) or complete (sender)."""
    request = await _get_request_service(session).update_status(request_id, user_id, data.status)
    return RequestMessageEnvelope(
        message=f"Request {data.status.value.lower()} successfully", request=request
    )


@router.delete("/{request_id}", response_model=MessageResponse)
async def cancel_request(session: DbSession, request_id: str, user_id: CurrentUserId):
    """Cancel a pending request the caller sent."""
    await _get_request_service(session).cancel(request_id, user_id)
    return MessageResponse(message="Request cancelled successfully")
