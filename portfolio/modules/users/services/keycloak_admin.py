"""
Keycloak Admin Client

Thin async wrapper over the Keycloak admin REST API. Every failure, HTTP or
transport, surfaces as IdentityProviderError carrying the upstream status
and body.
"""
import logging
from typing import Any, Dict, List, Optional
import httpx
from portfolio.modules.config import KeycloakSettings
from portfolio.modules.exceptions import IdentityProviderError

logger = logging.getLogger("portfolio.users.keycloak")


def _failure(action: str, response: httpx.Response) -> IdentityProviderError:
    if response.is_client_error:
        kind = "Client error"
    elif response.is_server_error:
        kind = "Server error"
    else:
        kind = "Unexpected response"
    return IdentityProviderError(
        f"{kind} when {action}: {response.status_code} - {response.text}",
        status_code=response.status_code,
        body=response.text,
    )


class KeycloakAdminClient:
    """Client for the Keycloak admin endpoints used by registration."""

    def __init__(
        self,
        settings: KeycloakSettings,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.settings = settings
        self._client = client

    async def _request(self, action: str, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug(f"[KeycloakAdminClient] {method} {url} ({action})")
        try:
            if self._client is not None:
                return await self._client.request(method, url, **kwargs)
            async with httpx.AsyncClient(timeout=self.settings.timeout_seconds) as client:
                return await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise IdentityProviderError(f"HTTP error when {action}: {e}") from e

    @staticmethod
    def _bearer(token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    async def get_admin_token(self) -> str:
        """Password-grant token for the admin user of the admin realm."""
        action = "getting admin token"
        url = (
            f"{self.settings.server_url}/realms/{self.settings.admin_realm}"
            f"/protocol/openid-connect/token"
        )
        response = await self._request(
            action,
            "POST",
            url,
            data={
                "grant_type": "password",
                "client_id": self.settings.admin_client_id,
                "username": self.settings.admin_username or "",
                "password": self.settings.admin_password or "",
            },
        )
        if response.status_code != 200:
            raise _failure(action, response)
        try:
            body = response.json()
        except ValueError:
            raise IdentityProviderError(
                f"Malformed response when {action}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            raise IdentityProviderError(
                "Access token not found in response",
                status_code=response.status_code,
                body=response.text,
            )
        return str(token)

    async def create_user(self, token: str, representation: Dict[str, Any]) -> str:
        """Create a user and return its id, taken from the Location header."""
        action = "creating user"
        response = await self._request(
            action,
            "POST",
            f"{self.settings.admin_realm_url}/users",
            json=representation,
            headers=self._bearer(token),
        )
        if response.status_code != 201:
            raise _failure(action, response)
        location = response.headers.get("Location")
        if not location:
            raise IdentityProviderError(
                "User created but location header not found",
                status_code=response.status_code,
                body=response.text,
            )
        return location.rstrip("/").rsplit("/", 1)[-1]

    async def list_realm_roles(self, token: str) -> List[Dict[str, Any]]:
        action = "fetching roles"
        response = await self._request(
            action,
            "GET",
            f"{self.settings.admin_realm_url}/roles",
            headers=self._bearer(token),
        )
        if response.status_code != 200:
            raise _failure(action, response)
        try:
            roles = response.json()
        except ValueError:
            raise IdentityProviderError(
                f"Malformed response when {action}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        if not isinstance(roles, list):
            raise IdentityProviderError(
                f"Unexpected roles payload: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return roles

    async def find_realm_role(self, token: str, name: str) -> Dict[str, Any]:
        """Look up a realm role by name; the role list is assumed to fit one page."""
        roles = await self.list_realm_roles(token)
        for role in roles:
            if isinstance(role, dict) and role.get("name") == name:
                return role
        available = [str(role["name"]) for role in roles if isinstance(role, dict) and "name" in role]
        raise IdentityProviderError(
            f"Role '{name}' not found. Available roles: {', '.join(available)}. "
            f"Please create the '{name}' role in Keycloak."
        )

    async def assign_realm_role(self, token: str, user_id: str, role: Dict[str, Any]) -> None:
        action = "assigning role"
        response = await self._request(
            action,
            "POST",
            f"{self.settings.admin_realm_url}/users/{user_id}/role-mappings/realm",
            json=[role],
            headers=self._bearer(token),
        )
        if response.status_code != 204:
            raise _failure(action, response)

    async def delete_user(self, token: str, user_id: str) -> None:
        action = "deleting user"
        response = await self._request(
            action,
            "DELETE",
            f"{self.settings.admin_realm_url}/users/{user_id}",
            headers=self._bearer(token),
        )
        if response.status_code != 204:
            raise _failure(action, response)
        logger.info(f"Keycloak user deleted: {user_id}")
