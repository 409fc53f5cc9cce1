"""
Domain Models

Pure data models representing portfolio entities.
"""

from .project import Project
from .skill import Skill
from .experience import Experience
from .user_profile import UserProfile

__all__ = [
    "Project",
    "Skill",
    "Experience",
    "UserProfile",
]
