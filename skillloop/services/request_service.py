"""
Request service - the exchange request lifecycle.

    Pending --accept/reject (receiver)--> Accepted | Rejected
    Accepted --complete (requester)-----> Completed

Rejected and Completed are terminal. A Pending request can be cancelled
(hard-deleted) by its sender.
"""

import logging

from skillloop.core.errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from skillloop.db.models.request import Request, RequestStatus
from skillloop.db.repositories.request_repository import RECEIVED, SENT, RequestRepository
from skillloop.db.repositories.skill_repository import SkillRepository
from skillloop.schemas.request import RequestCreate, RequestResponse, SkillRequestResponse
from skillloop.services.common import parse_id

logger = logging.getLogger(__name__)

# target status -> statuses it may be entered from
ALLOWED_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.ACCEPTED: frozenset({RequestStatus.PENDING}),
    RequestStatus.REJECTED: frozenset({RequestStatus.PENDING}),
    RequestStatus.COMPLETED: frozenset({RequestStatus.ACCEPTED}),
}
TERMINAL_STATUSES = frozenset({RequestStatus.REJECTED, RequestStatus.COMPLETED})
LIST_TYPES = (SENT, RECEIVED, "both")


def _to_response(request: Request) -> RequestResponse:
    return RequestResponse.model_validate(request, from_attributes=True)


def _parse_status(value: str | None) -> RequestStatus | None:
    if not value:
        return None
    try:
        return RequestStatus(value)
    except ValueError:
        raise BadRequestError("Invalid status")


class RequestService:
    """Handles exchange requests: creation, listing, transitions and cancellation."""

    def __init__(self, request_repo: RequestRepository, skill_repo: SkillRepository):
        self.request_repo = request_repo
        self.skill_repo = skill_repo

    async def create(self, from_user_id: str, data: RequestCreate) -> RequestResponse:
        skill_id = parse_id(data.skill_id, "skill")
        skill = await self.skill_repo.get_by_id(skill_id)
        if not skill or not skill.is_active:
            raise NotFoundError("Skill not found")
        if skill.user_id == from_user_id:
            raise BadRequestError("You cannot request your own skill")
        if await self.request_repo.find_pending(skill_id, from_user_id):
            raise ConflictError("You already have a pending request for this skill")

        request = Request(
            skill_id=skill_id,
            from_user_id=from_user_id,
            to_user_id=skill.user_id,
            message=data.message or "",
            status=RequestStatus.PENDING,
        )
        request = await self.request_repo.add(request)
        logger.info("User %s requested skill %s (request %s)", from_user_id, skill_id, request.id)
        return _to_response(await self.request_repo.get_with_relations(request.id))

    async def list_mine(
        self, user_id: str, status: str | None = None, type: str | None = None
    ) -> list[RequestResponse]:
        if type and type not in LIST_TYPES:
            raise BadRequestError("Invalid type")
        requests = await self.request_repo.list_for_user(
            user_id, type=type, status=_parse_status(status)
        )
        return [_to_response(r) for r in requests]

    async def get_by_id(self, id: str) -> RequestResponse:
        request = await self.request_repo.get_with_relations(parse_id(id, "request"))
        if not request:
            raise NotFoundError("Request not found")
        return _to_response(request)

    async def update_status(
        self, id: str, requester_id: str, new_status: RequestStatus
    ) -> RequestResponse:
        """Move a request along the lifecycle. Any rejected attempt leaves it untouched."""
        if new_status not in ALLOWED_TRANSITIONS:
            raise BadRequestError("Invalid status")
        request = await self.request_repo.get_by_id(parse_id(id, "request"))
        if not request:
            raise NotFoundError("Request not found")

        if new_status in (RequestStatus.ACCEPTED, RequestStatus.REJECTED):
            if request.to_user_id != requester_id:
                raise ForbiddenError("You are not authorized to update this request")
        elif request.from_user_id != requester_id:
            raise ForbiddenError("Only the requester can mark this as completed")

        current = request.status
        if new_status == RequestStatus.COMPLETED and current not in ALLOWED_TRANSITIONS[new_status]:
            raise BadRequestError("Only accepted requests can be marked as completed")
        if current in TERMINAL_STATUSES:
            raise BadRequestError(f"Cannot update a {current.value.lower()} request")
        if current not in ALLOWED_TRANSITIONS[new_status]:
            raise BadRequestError("Only pending requests can be accepted or rejected")

        request.status = new_status
        await self.request_repo.save(request)
        logger.info(
            "Request %s moved %s -> %s by %s", request.id, current.value, new_status.value, requester_id
        )
        return _to_response(await self.request_repo.get_with_relations(request.id))

    async def cancel(self, id: str, requester_id: str) -> None:
        """Hard-delete a pending request. Only its sender may do this."""
        request = await self.request_repo.get_by_id(parse_id(id, "request"))
        if not request:
            raise NotFoundError("Request not found")
        if request.from_user_id != requester_id:
            raise ForbiddenError("You can only cancel your own requests")
        if request.status != RequestStatus.PENDING:
            raise BadRequestError(f"Cannot cancel a {request.status.value.lower()} request")
        await self.request_repo.delete(request)
        logger.info("Request %s cancelled by %s", id, requester_id)

    async def list_for_skill(self, skill_id: str, requester_id: str) -> list[SkillRequestResponse]:
        skill = await self.skill_repo.get_by_id(parse_id(skill_id, "skill"))
        if not skill or skill.user_id != requester_id:
            raise ForbiddenError("You can only view requests for your own skills")
        requests = await self.request_repo.list_for_skill(skill.id)
        return [SkillRequestResponse.model_validate(r, from_attributes=True) for r in requests]
