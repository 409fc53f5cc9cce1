"""
REST API Endpoints
"""

from .registration_endpoints import router as registration_router

__all__ = [
    "registration_router",
]
