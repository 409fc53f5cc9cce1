"""
REST API Endpoints

Thin API layer that delegates to services.
"""

from .project_endpoints import router as project_router
from .skill_endpoints import router as skill_router
from .experience_endpoints import router as experience_router
from .profile_endpoints import router as profile_router

__all__ = [
    "project_router",
    "skill_router",
    "experience_router",
    "profile_router",
]
