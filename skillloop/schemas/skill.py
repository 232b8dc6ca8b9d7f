"""Skill request/response schemas - REST API contract."""

from datetime import datetime

from skillloop.db.models.skill import ExperienceLevel
from skillloop.schemas.user import UserBrief, UserDetail
from skillloop.schemas.validation import (
    CamelModel,
    RuleModel,
    min_length,
    one_of,
    optional,
    required,
    string_list,
)

EXPERIENCE_LEVELS = [level.value for level in ExperienceLevel]


class Availability(CamelModel):
    days: list[str] = []
    time_slots: list[str] = []


class AvailabilityInput(RuleModel):
    days: list[str] | None = None
    time_slots: list[str] | None = None

    rules = (
        ("days", optional(string_list), "Availability days must be a list of strings"),
        ("time_slots", optional(string_list), "Availability time slots must be a list of strings"),
    )


class SkillCreate(RuleModel):
    category: str | None = None
    title: str | None = None
    description: str | None = None
    experience_level: ExperienceLevel | None = None
    availability: AvailabilityInput | None = None

    rules = (
        ("category", required, "Category is required"),
        ("title", required, "Title is required"),
        ("title", min_length(3), "Title must be at least 3 characters"),
        ("description", required, "Description is required"),
        ("description", min_length(10), "Description must be at least 10 characters"),
        ("experience_level", one_of(EXPERIENCE_LEVELS), "Invalid experience level"),
    )


class SkillUpdate(RuleModel):
    category: str | None = None
    title: str | None = None
    description: str | None = None
    experience_level: ExperienceLevel | None = None
    availability: AvailabilityInput | None = None

    rules = (
        ("category", optional(required), "Category cannot be empty"),
        ("title", optional(min_length(3)), "Title must be at least 3 characters"),
        ("description", optional(min_length(10)), "Description must be at least 10 characters"),
        ("experience_level", optional(one_of(EXPERIENCE_LEVELS)), "Invalid experience level"),
    )


class SkillBrief(CamelModel):
    """Narrow projection used inside requests."""

    id: str
    title: str
    category: str
    description: str
    experience_level: ExperienceLevel
    is_active: bool

    model_config = {"from_attributes": True}


class SkillResponse(CamelModel):
    id: str
    user_id: str
    user: UserBrief
    category: str
    title: str
    description: str
    experience_level: ExperienceLevel
    availability: Availability
    is_active: bool
    created_at: datetime
    updated_at: datetime


class SkillDetailResponse(SkillResponse):
    user: UserDetail
