"""
Authentication Middleware

FastAPI dependencies that turn the bearer token into a set of authorities
and guard routes by required authority.
"""
import logging
from typing import Any, Callable, Dict, Optional, Set
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.concurrency import run_in_threadpool
from portfolio.modules.config import JwtSettings
from portfolio.modules.exceptions import AccessDeniedError
from portfolio.modules.users.auth.roles import ADMIN, roles_from_token
from portfolio.modules.users.auth.tokens import TokenVerifier

logger = logging.getLogger("portfolio.users.auth")

bearer_scheme = HTTPBearer(auto_error=False)

_token_verifier: Optional[TokenVerifier] = None


def get_token_verifier() -> TokenVerifier:
    """Lazily build the verifier so importing the app needs no network."""
    global _token_verifier
    if _token_verifier is None:
        _token_verifier = TokenVerifier(JwtSettings.from_env())
    return _token_verifier


async def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier)
) -> Dict[str, Any]:
    """
    FastAPI dependency returning the verified claims of the bearer token.

    Raises AccessDeniedError if the token is missing or invalid.
    """
    if credentials is None:
        raise AccessDeniedError("Authentication required. Missing bearer token.")
    # JWKS lookups are blocking I/O
    return await run_in_threadpool(verifier.decode, credentials.credentials)


async def get_authorities(
    claims: Dict[str, Any] = Depends(get_token_claims)
) -> Set[str]:
    return roles_from_token(claims)


def require_authority(authority: str) -> Callable:
    """Build a dependency that requires ``authority`` on the caller."""

    async def guard(authorities: Set[str] = Depends(get_authorities)) -> Set[str]:
        if authority not in authorities:
            logger.info(f"Missing authority {authority}; caller has {sorted(authorities)}")
            raise AccessDeniedError(f"Authority '{authority}' required")
        return authorities

    guard.__name__ = f"require_{authority.lower()}"
    return guard


require_admin = require_authority(ADMIN)
