# Repository pattern: abstract data access away from services

from skillloop.db.repositories.request_repository import RequestRepository
from skillloop.db.repositories.skill_repository import SkillRepository
from skillloop.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "SkillRepository", "RequestRepository"]
