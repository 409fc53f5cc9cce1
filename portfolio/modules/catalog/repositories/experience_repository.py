"""
Experience Repository

Handles all database operations for experiences and their responsibility
and technology collections.
"""
import logging
from typing import Any, Dict, List
from portfolio.modules.catalog.repositories.base import CatalogRepository, SideTable

logger = logging.getLogger("portfolio.catalog.experiences.repository")


class ExperienceRepository(CatalogRepository):
    """Repository for experience data access."""

    table = "experiences"
    columns = (
        "company", "position", "description", "location", "start_date",
        "end_date", "current", "company_logo_url", "created_at", "updated_at",
    )
    side_tables = (
        SideTable("experience_responsibilities", "experience_id", "responsibility", "responsibilities"),
        SideTable("experience_technologies", "experience_id", "technology", "technologies"),
    )
    # Most recent first
    order_by = "m.start_date DESC, m.id"

    async def list_current(self) -> List[Dict[str, Any]]:
        return await self._fetch("m.current = TRUE")
