"""
Skill Service

Business logic for skills.
"""
import logging
from dataclasses import replace
from typing import List, Optional
from portfolio.modules.cache import ReadCache
from portfolio.modules.catalog.domain.skill import Skill
from portfolio.modules.catalog.repositories.skill_repository import SkillRepository
from portfolio.modules.catalog.services.base import CachedService
from portfolio.modules.exceptions import NotFoundError

logger = logging.getLogger("portfolio.catalog.skills.service")

SKILLS = "skills"
SKILL = "skill"


class SkillService(CachedService):
    """Service for skill business logic."""

    namespaces = (SKILLS, SKILL)

    def __init__(
        self,
        repository: Optional[SkillRepository] = None,
        cache: Optional[ReadCache] = None
    ):
        super().__init__(cache)
        self.repository = repository or SkillRepository()

    async def list_skills(self) -> List[Skill]:
        async def load():
            return [Skill.from_dict(row) for row in await self.repository.list()]
        return await self._cached(SKILLS, load)

    async def list_skills_by_category(self, category: str) -> List[Skill]:
        rows = await self.repository.list_by_category(category)
        return [Skill.from_dict(row) for row in rows]

    async def list_skills_by_proficiency(self, level: int) -> List[Skill]:
        """Skills with proficiency level >= level."""
        rows = await self.repository.list_by_min_proficiency(level)
        return [Skill.from_dict(row) for row in rows]

    async def get_skill(self, skill_id: int) -> Skill:
        async def load():
            row = await self.repository.get_by_id(skill_id)
            if not row:
                raise NotFoundError(f"Skill not found with id: {skill_id}")
            return Skill.from_dict(row)
        return await self._cached(SKILL, load, key=skill_id)

    async def create_skill(self, skill: Skill) -> Skill:
        now = self._now()
        skill = replace(skill, id=None, created_at=now, updated_at=now)
        skill_id = await self.repository.create(skill.to_record())
        self._evict()
        logger.info(f"[SkillService.create_skill] Created skill {skill_id}")
        return replace(skill, id=skill_id)

    async def update_skill(self, skill_id: int, skill: Skill) -> Skill:
        existing = await self.repository.get_by_id(skill_id)
        if not existing:
            raise NotFoundError(f"Skill not found with id: {skill_id}")
        skill = replace(
            skill,
            id=skill_id,
            created_at=existing.get("created_at"),
            updated_at=self._now()
        )
        if not await self.repository.update(skill_id, skill.to_record()):
            raise NotFoundError(f"Skill not found with id: {skill_id}")
        self._evict()
        return skill

    async def delete_skill(self, skill_id: int) -> None:
        if not await self.repository.exists(skill_id):
            raise NotFoundError(f"Skill not found with id: {skill_id}")
        await self.repository.delete(skill_id)
        self._evict()
        logger.info(f"[SkillService.delete_skill] Deleted skill {skill_id}")
