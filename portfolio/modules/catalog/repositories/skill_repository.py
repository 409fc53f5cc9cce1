"""
Skill Repository

Handles all database operations for the skills table.
"""
import logging
from typing import Any, Dict, List
from portfolio.modules.catalog.repositories.base import CatalogRepository

logger = logging.getLogger("portfolio.catalog.skills.repository")


class SkillRepository(CatalogRepository):
    """Repository for skill data access."""

    table = "skills"
    columns = (
        "name", "category", "proficiency_level", "icon_url",
        "years_of_experience", "created_at", "updated_at",
    )

    async def list_by_category(self, category: str) -> List[Dict[str, Any]]:
        return await self._fetch("m.category = :category", {"category": category})

    async def list_by_min_proficiency(self, level: int) -> List[Dict[str, Any]]:
        """Skills whose proficiency level is at least ``level``."""
        return await self._fetch("m.proficiency_level >= :level", {"level": level})
