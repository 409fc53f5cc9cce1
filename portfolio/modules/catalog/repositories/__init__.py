"""
Data Access Layer (Repositories)

Repositories handle all database interactions.
"""

from .project_repository import ProjectRepository
from .skill_repository import SkillRepository
from .experience_repository import ExperienceRepository
from .user_profile_repository import UserProfileRepository

__all__ = [
    "ProjectRepository",
    "SkillRepository",
    "ExperienceRepository",
    "UserProfileRepository",
]
