from skillloop.db.models.request import Request, RequestStatus
from skillloop.db.models.skill import ExperienceLevel, Skill
from skillloop.db.models.user import User

__all__ = ["User", "Skill", "ExperienceLevel", "Request", "RequestStatus"]
