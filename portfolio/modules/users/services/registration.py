"""
User Registration Service

Registers an end user in Keycloak: admin token, create account, assign the
registration role. Whether a half-registered account is deleted when a later
step fails is controlled by KEYCLOAK_ROLLBACK_ON_FAILURE.
"""
import logging
from typing import Optional
from portfolio.modules.config import KeycloakSettings
from portfolio.modules.exceptions import IdentityProviderError
from portfolio.modules.users.domain.account import NewAccount
from portfolio.modules.users.services.keycloak_admin import KeycloakAdminClient

logger = logging.getLogger("portfolio.users.registration")


class UserRegistrationService:
    """Service orchestrating self-service registration."""

    def __init__(
        self,
        settings: Optional[KeycloakSettings] = None,
        admin_client: Optional[KeycloakAdminClient] = None
    ):
        self.settings = settings or KeycloakSettings.from_env()
        self.admin_client = admin_client or KeycloakAdminClient(self.settings)

    async def register_user(self, account: NewAccount) -> str:
        """
        Create the account and grant it the registration role.

        Returns:
            Keycloak id of the new user

        Raises:
            IdentityProviderError: If any Keycloak call fails
        """
        logger.info(f"Starting user registration for username: {account.username}")
        try:
            token = await self.admin_client.get_admin_token()
            logger.debug("[UserRegistrationService.register_user] obtained admin token")

            user_id = await self.admin_client.create_user(token, account.to_representation())
            logger.info(f"User created with ID: {user_id}")

            try:
                role = await self.admin_client.find_realm_role(token, self.settings.registration_role)
                await self.admin_client.assign_realm_role(token, user_id, role)
            except IdentityProviderError:
                await self._handle_partial_failure(token, user_id)
                raise

            logger.info(f"User registration completed successfully for username: {account.username}")
            return user_id
        except IdentityProviderError as e:
            logger.error(f"Error during user registration for {account.username}: {e}")
            raise IdentityProviderError(
                f"User registration failed: {e.message}",
                status_code=e.status_code,
                body=e.body,
            ) from e

    async def _handle_partial_failure(self, token: str, user_id: str) -> None:
        if not self.settings.rollback_on_failure:
            logger.warning(
                f"Keycloak user {user_id} was created but has no "
                f"'{self.settings.registration_role}' role (rollback disabled)"
            )
            return
        logger.info(f"Rolling back Keycloak user {user_id}")
        try:
            await self.admin_client.delete_user(token, user_id)
        except IdentityProviderError as e:
            logger.error(f"Rollback of Keycloak user {user_id} failed: {e}")
