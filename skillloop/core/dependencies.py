"""
FastAPI dependencies - injection for auth.
The token identifies the caller; routes that write on the caller's behalf also
confirm the account still exists.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skillloop.core.errors import UnauthorizedError
from skillloop.core.security import verify_token
from skillloop.db.repositories.user_repository import UserRepository
from skillloop.db.session import DbSession

security = HTTPBearer(auto_error=False)


async def get_token_user_id(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Resolve the bearer token to a user id. Raises 401 if missing, malformed, invalid or expired."""
    if not credentials:
        if request.headers.get("Authorization"):
            raise UnauthorizedError("Invalid authorization format. Expected: Bearer <token>")
        raise UnauthorizedError("Authorization header is missing")
    return verify_token(credentials.credentials)


async def get_current_user_id(
    session: DbSession,
    user_id: Annotated[str, Depends(get_token_user_id)],
) -> str:
    """Token user id, checked against the store. Raises 401 if the account is gone."""
    user = await UserRepository(session).get_by_id(user_id)
    if not user:
        raise UnauthorizedError("User not found")
    return user.id


# Profile routes report a vanished account themselves (404)
TokenUserId = Annotated[str, Depends(get_token_user_id)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
