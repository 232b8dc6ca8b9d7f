"""Response envelopes. Every payload carries ``success``; messages only where the API sends one."""

from skillloop.schemas.request import RequestResponse, SkillRequestResponse
from skillloop.schemas.skill import SkillDetailResponse, SkillResponse
from skillloop.schemas.user import UserResponse
from skillloop.schemas.validation import CamelModel


class Envelope(CamelModel):
    success: bool = True


class MessageResponse(Envelope):
    message: str


class AuthResponse(MessageResponse):
    token: str
    user: UserResponse


class UserEnvelope(Envelope):
    user: UserResponse


class UserMessageEnvelope(MessageResponse):
    user: UserResponse


class SkillEnvelope(Envelope):
    skill: SkillDetailResponse


class SkillMessageEnvelope(MessageResponse):
    skill: SkillResponse


class SkillListEnvelope(Envelope):
    count: int
    skills: list[SkillResponse]


class RequestEnvelope(Envelope):
    request: RequestResponse


class RequestMessageEnvelope(MessageResponse):
    request: RequestResponse


class RequestListEnvelope(Envelope):
    count: int
    requests: list[RequestResponse]


class SkillRequestListEnvelope(Envelope):
    count: int
    requests: list[SkillRequestResponse]
