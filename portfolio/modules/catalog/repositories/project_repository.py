"""
Project Repository

Handles all database operations for projects and their technology and
category collections.
"""
import logging
from typing import Any, Dict, List
from portfolio.modules.catalog.repositories.base import CatalogRepository, SideTable

logger = logging.getLogger("portfolio.catalog.projects.repository")


class ProjectRepository(CatalogRepository):
    """Repository for project data access."""

    table = "projects"
    columns = (
        "title", "description", "summary", "github_url", "live_url",
        "image_url", "start_date", "end_date", "featured",
        "created_at", "updated_at",
    )
    side_tables = (
        SideTable("project_technologies", "project_id", "technology", "technologies"),
        SideTable("project_categories", "project_id", "category", "categories"),
    )

    async def list_featured(self) -> List[Dict[str, Any]]:
        return await self._fetch("m.featured = TRUE")

    async def list_by_category(self, category: str) -> List[Dict[str, Any]]:
        return await self._fetch(
            "m.id IN (SELECT project_id FROM project_categories WHERE category = :category)",
            {"category": category}
        )

    async def list_by_technology(self, technology: str) -> List[Dict[str, Any]]:
        return await self._fetch(
            "m.id IN (SELECT project_id FROM project_technologies WHERE technology = :technology)",
            {"technology": technology}
        )
