"""
User Profile Service

Business logic for the public user profile. Reads are not cached.
"""
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from portfolio.modules.catalog.domain.user_profile import UserProfile
from portfolio.modules.catalog.repositories.user_profile_repository import UserProfileRepository
from portfolio.modules.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("portfolio.catalog.profiles.service")


class UserProfileService:
    """Service for user profile business logic."""

    def __init__(self, repository: Optional[UserProfileRepository] = None):
        self.repository = repository or UserProfileRepository()

    async def list_profiles(self) -> List[UserProfile]:
        return [UserProfile.from_dict(row) for row in await self.repository.list()]

    async def get_profile(self, profile_id: int) -> UserProfile:
        row = await self.repository.get_by_id(profile_id)
        if not row:
            raise NotFoundError(f"User profile not found with id: {profile_id}")
        return UserProfile.from_dict(row)

    async def get_profile_by_username(self, username: str) -> UserProfile:
        logger.debug(f"[UserProfileService.get_profile_by_username] username={username}")
        row = await self.repository.get_by_username(username)
        if not row:
            raise NotFoundError(f"User profile not found with username: {username}")
        return UserProfile.from_dict(row)

    async def create_profile(self, profile: UserProfile) -> UserProfile:
        if await self.repository.username_exists(profile.username):
            raise ConflictError(f"Username already taken: {profile.username}")
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        profile = replace(profile, id=None, created_at=now, updated_at=now)
        profile_id = await self.repository.create(profile.to_record())
        logger.info(f"[UserProfileService.create_profile] Created profile {profile_id} ({profile.username})")
        return replace(profile, id=profile_id)

    async def update_profile(self, profile_id: int, profile: UserProfile) -> UserProfile:
        """Replace every field except the username, which is fixed at creation."""
        existing = await self.repository.get_by_id(profile_id)
        if not existing:
            raise NotFoundError(f"User profile not found with id: {profile_id}")
        profile = replace(
            profile,
            id=profile_id,
            username=existing["username"],
            created_at=existing.get("created_at"),
            updated_at=datetime.now(timezone.utc).replace(tzinfo=None)
        )
        if not await self.repository.update(profile_id, profile.to_record()):
            raise NotFoundError(f"User profile not found with id: {profile_id}")
        return profile

    async def delete_profile(self, profile_id: int) -> None:
        if not await self.repository.exists(profile_id):
            raise NotFoundError(f"User profile not found with id: {profile_id}")
        await self.repository.delete(profile_id)
        logger.info(f"[UserProfileService.delete_profile] Deleted profile {profile_id}")
