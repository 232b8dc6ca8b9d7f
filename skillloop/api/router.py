"""
API router - aggregates all endpoint modules under /api.
"""

from fastapi import APIRouter

from skillloop.api.endpoints import auth, health, requests, skills

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(skills.router, prefix="/skills", tags=["skills"])
api_router.include_router(requests.router, prefix="/requests", tags=["requests"])
