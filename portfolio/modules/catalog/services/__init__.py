"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .project_service import ProjectService
from .skill_service import SkillService
from .experience_service import ExperienceService
from .user_profile_service import UserProfileService

__all__ = [
    "ProjectService",
    "SkillService",
    "ExperienceService",
    "UserProfileService",
]
