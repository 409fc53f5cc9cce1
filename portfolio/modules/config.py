"""
Service Configuration

Reads process configuration from the environment (and a local .env file).
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "postgresql://localhost:5432/portfolio")
CORS_ORIGINS = _get_list("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class KeycloakSettings:
    """Connection and admin credentials for the Keycloak admin REST API."""
    server_url: str = "http://localhost:8080"
    realm: str = "portfolio"
    client_id: str = "portfolio-service"
    client_secret: Optional[str] = None
    admin_realm: str = "master"
    admin_client_id: str = "admin-cli"
    admin_username: Optional[str] = None
    admin_password: Optional[str] = None
    registration_role: str = "client"
    rollback_on_failure: bool = False
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "KeycloakSettings":
        return cls(
            server_url=os.getenv("KEYCLOAK_AUTH_SERVER_URL", cls.server_url).rstrip("/"),
            realm=os.getenv("KEYCLOAK_REALM", cls.realm),
            client_id=os.getenv("KEYCLOAK_RESOURCE", cls.client_id),
            client_secret=os.getenv("KEYCLOAK_CREDENTIALS_SECRET"),
            admin_realm=os.getenv("KEYCLOAK_ADMIN_REALM", cls.admin_realm),
            admin_client_id=os.getenv("KEYCLOAK_ADMIN_CLIENT_ID", cls.admin_client_id),
            admin_username=os.getenv("KEYCLOAK_ADMIN_USERNAME"),
            admin_password=os.getenv("KEYCLOAK_ADMIN_PASSWORD"),
            registration_role=os.getenv("KEYCLOAK_REGISTRATION_ROLE", cls.registration_role),
            rollback_on_failure=_get_bool("KEYCLOAK_ROLLBACK_ON_FAILURE", cls.rollback_on_failure),
            timeout_seconds=float(os.getenv("KEYCLOAK_TIMEOUT_SECONDS", cls.timeout_seconds)),
        )

    @property
    def realm_url(self) -> str:
        return f"{self.server_url}/realms/{self.realm}"

    @property
    def admin_realm_url(self) -> str:
        return f"{self.server_url}/admin/realms/{self.realm}"


@dataclass(frozen=True)
class JwtSettings:
    """Bearer token validation settings."""
    jwks_url: Optional[str] = None
    public_key: Optional[str] = None
    algorithms: List[str] = field(default_factory=lambda: ["RS256"])
    issuer: Optional[str] = None
    audience: Optional[str] = None

    @classmethod
    def from_env(cls, keycloak: Optional[KeycloakSettings] = None) -> "JwtSettings":
        keycloak = keycloak or KeycloakSettings.from_env()
        return cls(
            jwks_url=os.getenv(
                "JWT_JWKS_URL",
                f"{keycloak.realm_url}/protocol/openid-connect/certs"
            ),
            public_key=os.getenv("JWT_PUBLIC_KEY"),
            algorithms=_get_list("JWT_ALGORITHMS", "RS256"),
            issuer=os.getenv("JWT_ISSUER", keycloak.realm_url),
            audience=os.getenv("JWT_AUDIENCE"),
        )
