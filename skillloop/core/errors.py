"""
Error taxonomy and the centralized error-to-response translator.
Services raise AppError subclasses; handlers below turn every failure into the
uniform envelope {success: false, message, ...}.
"""

import logging
import re
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillloop.config import get_settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for expected failures. Carries the HTTP status and a client-safe message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Duplicate unique field or duplicate pending request. The public API reports these as 400."""

    status_code = status.HTTP_400_BAD_REQUEST


# Unique-constraint column -> client message
DUPLICATE_MESSAGES = {
    "email": "Email already exists",
    "phone": "Phone already exists",
    "skill_id": "You already have a pending request for this skill",
    "from_user_id": "You already have a pending request for this skill",
}

_PG_KEY = re.compile(r"Key \(([\w, ]+)\)=\(.*\) already exists")
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: ([\w.]+)")
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> str | None:
    # asyncpg exposes sqlstate, psycopg2 pgcode
    return getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)


def duplicate_field(exc: IntegrityError) -> str | None:
    """First column named in a unique violation (PostgreSQL or SQLite); None for any other integrity error."""
    state = _sqlstate(exc)
    if state and state != UNIQUE_VIOLATION:
        return None
    text = str(exc.orig)
    match = _PG_KEY.search(text)
    if match:
        return match.group(1).split(",")[0].strip()
    match = _SQLITE_UNIQUE.search(text)
    if match:
        return match.group(1).split(".")[-1]
    return None


def _envelope(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message, **extra})


def _validation_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        ctx = err.get("ctx") or {}
        if err.get("type") == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        else:
            message = err.get("msg", "Invalid value")
        errors.append({"field": ".".join(loc) or "body", "message": message})
    return errors


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _envelope(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        errors=_validation_errors(exc),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    field = duplicate_field(exc)
    logger.warning("Integrity error on %s %s (field=%s)", request.method, request.url.path, field)
    if field is None:
        if _sqlstate(exc) == FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in str(exc.orig):
            return _envelope(status.HTTP_400_BAD_REQUEST, "Referenced record does not exist")
        return _envelope(status.HTTP_400_BAD_REQUEST, "Invalid data")
    message = DUPLICATE_MESSAGES.get(field, f"{field.capitalize()} already exists")
    return _envelope(status.HTTP_400_BAD_REQUEST, message)


async def token_error_handler(request: Request, exc: JWTError) -> JSONResponse:
    if isinstance(exc, ExpiredSignatureError):
        return _envelope(status.HTTP_401_UNAUTHORIZED, "Token has expired")
    return _envelope(status.HTTP_401_UNAUTHORIZED, "Invalid token")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _envelope(exc.status_code, "Route not found")
    response = _envelope(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    if get_settings().is_production:
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or "Internal Server Error",
        error="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the translator chain to the app. Order does not matter; Starlette matches by MRO."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(JWTError, token_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
