"""Exchange request schemas - REST API contract."""

from datetime import datetime

from skillloop.db.models.request import RequestStatus
from skillloop.schemas.skill import SkillBrief
from skillloop.schemas.user import UserBrief
from skillloop.schemas.validation import CamelModel, RuleModel, max_length, one_of, optional, required

# Statuses a client may move a request into
TARGET_STATUSES = [RequestStatus.ACCEPTED.value, RequestStatus.REJECTED.value, RequestStatus.COMPLETED.value]


class RequestCreate(RuleModel):
    skill_id: str | None = None
    message: str | None = None

    rules = (
        ("skill_id", required, "Skill ID is required"),
        ("message", optional(max_length(500)), "Message cannot exceed 500 characters"),
    )


class StatusUpdate(RuleModel):
    status: RequestStatus | None = None

    rules = (("status", one_of(TARGET_STATUSES), "Invalid status"),)


class RequestResponse(CamelModel):
    id: str
    skill_id: str
    from_user_id: str
    to_user_id: str
    skill: SkillBrief
    from_user: UserBrief
    to_user: UserBrief
    message: str | None = None
    status: RequestStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SkillRequestResponse(CamelModel):
    """Request as seen by the skill owner: requester projection only."""

    id: str
    skill_id: str
    from_user_id: str
    to_user_id: str
    from_user: UserBrief
    message: str | None = None
    status: RequestStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
