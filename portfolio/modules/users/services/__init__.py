"""
Business Logic Services
"""

from .keycloak_admin import KeycloakAdminClient
from .registration import UserRegistrationService

__all__ = [
    "KeycloakAdminClient",
    "UserRegistrationService",
]
