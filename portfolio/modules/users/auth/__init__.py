"""
Authentication and Authorization Module

Provides:
- Bearer token validation
- Keycloak realm role to authority mapping
- Authority guards for routes
"""

from .middleware import get_authorities, get_token_claims, require_admin, require_authority
from .roles import ADMIN, roles_from_token

__all__ = [
    "ADMIN",
    "get_authorities",
    "get_token_claims",
    "require_admin",
    "require_authority",
    "roles_from_token",
]
