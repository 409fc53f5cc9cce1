"""
Experience Service

Business logic for work experience entries.
"""
import logging
from dataclasses import replace
from typing import List, Optional
from portfolio.modules.cache import ReadCache
from portfolio.modules.catalog.domain.experience import Experience
from portfolio.modules.catalog.repositories.experience_repository import ExperienceRepository
from portfolio.modules.catalog.services.base import CachedService
from portfolio.modules.exceptions import NotFoundError

logger = logging.getLogger("portfolio.catalog.experiences.service")

EXPERIENCES = "experiences"
CURRENT_EXPERIENCES = "current_experiences"
EXPERIENCE = "experience"


class ExperienceService(CachedService):
    """Service for experience business logic."""

    namespaces = (EXPERIENCES, CURRENT_EXPERIENCES, EXPERIENCE)

    def __init__(
        self,
        repository: Optional[ExperienceRepository] = None,
        cache: Optional[ReadCache] = None
    ):
        super().__init__(cache)
        self.repository = repository or ExperienceRepository()

    async def list_experiences(self) -> List[Experience]:
        """All experiences, most recent start date first."""
        async def load():
            return [Experience.from_dict(row) for row in await self.repository.list()]
        return await self._cached(EXPERIENCES, load)

    async def list_current_experiences(self) -> List[Experience]:
        async def load():
            return [Experience.from_dict(row) for row in await self.repository.list_current()]
        return await self._cached(CURRENT_EXPERIENCES, load)

    async def get_experience(self, experience_id: int) -> Experience:
        async def load():
            row = await self.repository.get_by_id(experience_id)
            if not row:
                raise NotFoundError(f"Experience not found with id: {experience_id}")
            return Experience.from_dict(row)
        return await self._cached(EXPERIENCE, load, key=experience_id)

    async def create_experience(self, experience: Experience) -> Experience:
        now = self._now()
        experience = replace(experience, id=None, created_at=now, updated_at=now)
        experience_id = await self.repository.create(experience.to_record())
        self._evict()
        logger.info(f"[ExperienceService.create_experience] Created experience {experience_id}")
        return replace(experience, id=experience_id)

    async def update_experience(self, experience_id: int, experience: Experience) -> Experience:
        existing = await self.repository.get_by_id(experience_id)
        if not existing:
            raise NotFoundError(f"Experience not found with id: {experience_id}")
        experience = replace(
            experience,
            id=experience_id,
            created_at=existing.get("created_at"),
            updated_at=self._now()
        )
        if not await self.repository.update(experience_id, experience.to_record()):
            raise NotFoundError(f"Experience not found with id: {experience_id}")
        self._evict()
        return experience

    async def delete_experience(self, experience_id: int) -> None:
        if not await self.repository.exists(experience_id):
            raise NotFoundError(f"Experience not found with id: {experience_id}")
        await self.repository.delete(experience_id)
        self._evict()
        logger.info(f"[ExperienceService.delete_experience] Deleted experience {experience_id}")
