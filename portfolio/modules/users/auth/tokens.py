"""
Bearer Token Validation

Decodes and verifies Keycloak-issued JWTs with PyJWT. Signing keys come from
the realm JWKS endpoint unless a static key is configured.
"""
import logging
from typing import Any, Dict, Optional
import jwt
from portfolio.modules.config import JwtSettings
from portfolio.modules.exceptions import AccessDeniedError

logger = logging.getLogger("portfolio.users.tokens")


class TokenVerifier:
    """Verifies bearer tokens and returns their claims."""

    def __init__(self, settings: JwtSettings):
        self.settings = settings
        self._jwks_client: Optional[jwt.PyJWKClient] = None
        if not settings.public_key:
            if not settings.jwks_url:
                raise ValueError("Either JWT_PUBLIC_KEY or JWT_JWKS_URL must be configured")
            self._jwks_client = jwt.PyJWKClient(settings.jwks_url)

    def _signing_key(self, token: str) -> Any:
        if self.settings.public_key:
            return self.settings.public_key
        return self._jwks_client.get_signing_key_from_jwt(token).key

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature, expiry, issuer and (if configured) audience.

        Raises:
            AccessDeniedError: If the token cannot be verified
        """
        try:
            return jwt.decode(
                token,
                self._signing_key(token),
                algorithms=list(self.settings.algorithms),
                issuer=self.settings.issuer,
                audience=self.settings.audience,
                options={"verify_aud": self.settings.audience is not None},
            )
        except jwt.PyJWKClientError as e:
            logger.warning(f"Unable to resolve signing key: {e}")
            raise AccessDeniedError("Unable to resolve token signing key")
        except jwt.ExpiredSignatureError:
            raise AccessDeniedError("Token has expired")
        except jwt.PyJWTError as e:
            raise AccessDeniedError(f"Invalid token: {e}")
