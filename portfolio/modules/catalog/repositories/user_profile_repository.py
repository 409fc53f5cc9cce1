"""
User Profile Repository

Handles all database operations for the user_profiles table.
"""
import logging
from typing import Any, Dict, Optional
from asyncpg.exceptions import UniqueViolationError
from portfolio.modules.catalog.repositories.base import CatalogRepository
from portfolio.modules.exceptions import ConflictError

logger = logging.getLogger("portfolio.catalog.profiles.repository")


class UserProfileRepository(CatalogRepository):
    """Repository for user profile data access."""

    table = "user_profiles"
    columns = (
        "full_name", "username", "bio", "title", "location", "email",
        "github_url", "linkedin_url", "twitter_url", "website_url",
        "resume_url", "profile_image_url", "created_at", "updated_at",
    )

    async def create(self, record: Dict[str, Any]) -> int:
        """Insert a profile; a concurrent insert of the same username is a conflict."""
        try:
            return await super().create(record)
        except UniqueViolationError as e:
            logger.warning(f"[UserProfileRepository.create] duplicate username {record.get('username')}: {e}")
            raise ConflictError(f"Username already taken: {record.get('username')}") from e

    async def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        records = await self._fetch("m.username = :username", {"username": username})
        return records[0] if records else None

    async def username_exists(self, username: str) -> bool:
        query = "SELECT 1 FROM user_profiles WHERE username = :username"
        return await self.db.fetch_val(query, {"username": username}) is not None
