"""
Auth endpoints - registration, login, profile and logout.
Design: thin controllers; AuthService holds the rules.
"""

from fastapi import APIRouter, status

from skillloop.core.dependencies import TokenUserId
from skillloop.db.repositories.user_repository import UserRepository
from skillloop.db.session import DbSession
from skillloop.schemas.common import AuthResponse, MessageResponse, UserEnvelope, UserMessageEnvelope
from skillloop.schemas.user import LoginRequest, ProfileUpdate, RegisterRequest
from skillloop.services.auth_service import AuthService

router = APIRouter()


def _get_auth_service(session: DbSession) -> AuthService:
    return AuthService(UserRepository(session))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: RegisterRequest):
    """Create an account and sign the caller in."""
    token, user = await _get_auth_service(session).register(data)
    return AuthResponse(message="User registered successfully", token=token, user=user)


@router.post("/login", response_model=AuthResponse)
async def login(session: DbSession, data: LoginRequest):
    token, user = await _get_auth_service(session).login(data)
    return AuthResponse(message="Login successful", token=token, user=user)


@router.get("/profile", response_model=UserEnvelope)
async def get_profile(session: DbSession, user_id: TokenUserId):
    user = await _get_auth_service(session).get_profile(user_id)
    return UserEnvelope(user=user)


@router.put("/profile", response_model=UserMessageEnvelope)
async def update_profile(session: DbSession, data: ProfileUpdate, user_id: TokenUserId):
    """Partial update of name, bio and phone."""
    user = await _get_auth_service(session).update_profile(user_id, data)
    return UserMessageEnvelope(message="Profile updated successfully", user=user)


@router.post("/logout", response_model=MessageResponse)
async def logout(user_id: TokenUserId):
    """Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logout successful. Please remove the token from your client.")
