"""
Account Domain Model

A new end-user account to be created in the identity provider.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class NewAccount:
    """Registration data for a new Keycloak user."""
    username: str
    email: str
    first_name: str
    last_name: str
    password: str

    def to_representation(self) -> Dict[str, Any]:
        """Keycloak UserRepresentation with a permanent password credential."""
        return {
            "username": self.username,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "enabled": True,
            "emailVerified": True,
            "credentials": [
                {
                    "type": "password",
                    "value": self.password,
                    "temporary": False,
                }
            ],
        }

    def __repr__(self) -> str:
        return f"NewAccount(username={self.username!r}, email={self.email!r})"
