"""
Health checks - for load balancers and monitoring.
"""

from fastapi import APIRouter
from sqlalchemy import text

from skillloop.config import get_settings
from skillloop.db.session import DbSession

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"success": True, "status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the store answer a trivial query?"""
    await session.execute(text("SELECT 1"))
    return {"success": True, "status": "ready"}
