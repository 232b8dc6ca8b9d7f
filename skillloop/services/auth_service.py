"""
Auth service - registration, login and profile use cases.
Design: depends on the user repository only; tokens and hashing come from core.security.
"""

import logging

from skillloop.core.errors import ConflictError, NotFoundError, UnauthorizedError
from skillloop.core.security import create_access_token, hash_password, verify_password
from skillloop.db.models.user import User
from skillloop.db.repositories.user_repository import UserRepository
from skillloop.schemas.user import LoginRequest, ProfileUpdate, RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

NULLABLE_PROFILE_FIELDS = frozenset({"bio"})


class AuthService:
    """Handles identity: who you are and what you may change about yourself."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, data: RegisterRequest) -> tuple[str, UserResponse]:
        email = data.email.lower()
        existing = await self.user_repo.find_by_email_or_phone(email, data.phone)
        if existing:
            if existing.email == email:
                raise ConflictError("Email already registered")
            raise ConflictError("Phone number already registered")

        user = User(
            name=data.name,
            email=email,
            phone=data.phone,
            hashed_password=hash_password(data.password),
        )
        user = await self.user_repo.add(user)
        logger.info("Registered user %s", user.id)
        return create_access_token(user.id), UserResponse.model_validate(user)

    async def login(self, data: LoginRequest) -> tuple[str, UserResponse]:
        user = await self.user_repo.get_by_email(data.email.lower())
        # Same message either way: don't reveal which credential was wrong
        if not user or not verify_password(data.password, user.hashed_password):
            logger.warning("Failed login attempt")
            raise UnauthorizedError("Invalid email or password")
        return create_access_token(user.id), UserResponse.model_validate(user)

    async def get_profile(self, user_id: str) -> UserResponse:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)

    async def update_profile(self, user_id: str, data: ProfileUpdate) -> UserResponse:
        """Partial update: only fields present in the payload change."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        # name and phone are required on the account; an explicit null only clears bio
        changes = {
            k: v
            for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k in NULLABLE_PROFILE_FIELDS
        }
        if "phone" in changes and changes["phone"] != user.phone:
            if await self.user_repo.phone_taken_by_other(changes["phone"], user_id):
                raise ConflictError("Phone number already in use")

        for field, value in changes.items():
            setattr(user, field, value)
        user = await self.user_repo.save(user)
        return UserResponse.model_validate(user)
