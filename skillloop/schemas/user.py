"""User request/response schemas - API contract and validation."""

from datetime import datetime

from skillloop.schemas.validation import (
    CamelModel,
    RuleModel,
    is_email,
    matches,
    max_bytes,
    max_length,
    min_length,
    optional,
    required,
)

PHONE_PATTERN = r"[0-9]{10,15}"


class RegisterRequest(RuleModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None

    raw_fields = frozenset({"password"})

    rules = (
        ("name", required, "Name is required"),
        ("name", min_length(2), "Name must be at least 2 characters"),
        ("email", is_email, "Valid email required"),
        ("phone", matches(PHONE_PATTERN), "Valid phone number required (10-15 digits)"),
        ("password", min_length(6), "Password must be at least 6 characters"),
        # bcrypt only looks at the first 72 bytes
        ("password", max_bytes(72), "Password cannot exceed 72 bytes"),
    )


class LoginRequest(RuleModel):
    email: str | None = None
    password: str | None = None

    raw_fields = frozenset({"password"})

    rules = (
        ("email", is_email, "Valid email required"),
        ("password", required, "Password is required"),
    )


class ProfileUpdate(RuleModel):
    name: str | None = None
    bio: str | None = None
    phone: str | None = None

    rules = (
        ("name", optional(min_length(2)), "Name must be at least 2 characters"),
        ("bio", optional(max_length(500)), "Bio cannot exceed 500 characters"),
        ("phone", optional(matches(PHONE_PATTERN)), "Valid phone number required"),
    )


class UserBrief(CamelModel):
    """Narrow projection used inside skills and requests."""

    id: str
    name: str
    email: str
    phone: str
    profile_image: str | None = None

    model_config = {"from_attributes": True}


class UserDetail(UserBrief):
    bio: str | None = None


class UserResponse(UserDetail):
    """Public user view. The password hash is never part of it."""

    created_at: datetime
    updated_at: datetime
