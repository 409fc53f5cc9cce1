"""
Role Mapping

Keycloak puts realm roles under the ``realm_access.roles`` claim. Each one
maps to a local authority named ``ROLE_<name>``.
"""
from typing import Any, Mapping, Set

ROLE_PREFIX = "ROLE_"
ADMIN = ROLE_PREFIX + "ADMIN"


def roles_from_token(claims: Mapping[str, Any]) -> Set[str]:
    """Return the local authorities granted by a decoded token's claims."""
    realm_access = claims.get("realm_access") if claims else None
    if not isinstance(realm_access, Mapping):
        return set()
    roles = realm_access.get("roles")
    if not isinstance(roles, (list, tuple)):
        return set()
    return {ROLE_PREFIX + role for role in roles if isinstance(role, str)}
