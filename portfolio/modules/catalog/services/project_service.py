"""
Project Service

Business logic for portfolio projects.
"""
import logging
from dataclasses import replace
from typing import List, Optional
from portfolio.modules.cache import ReadCache
from portfolio.modules.catalog.domain.project import Project
from portfolio.modules.catalog.repositories.project_repository import ProjectRepository
from portfolio.modules.catalog.services.base import CachedService
from portfolio.modules.exceptions import NotFoundError

logger = logging.getLogger("portfolio.catalog.projects.service")

PROJECTS = "projects"
FEATURED_PROJECTS = "featured_projects"
PROJECT = "project"


class ProjectService(CachedService):
    """Service for project business logic."""

    namespaces = (PROJECTS, FEATURED_PROJECTS, PROJECT)

    def __init__(
        self,
        repository: Optional[ProjectRepository] = None,
        cache: Optional[ReadCache] = None
    ):
        super().__init__(cache)
        self.repository = repository or ProjectRepository()

    async def list_projects(self) -> List[Project]:
        async def load():
            return [Project.from_dict(row) for row in await self.repository.list()]
        return await self._cached(PROJECTS, load)

    async def list_featured_projects(self) -> List[Project]:
        async def load():
            return [Project.from_dict(row) for row in await self.repository.list_featured()]
        return await self._cached(FEATURED_PROJECTS, load)

    async def list_projects_by_category(self, category: str) -> List[Project]:
        rows = await self.repository.list_by_category(category)
        return [Project.from_dict(row) for row in rows]

    async def list_projects_by_technology(self, technology: str) -> List[Project]:
        rows = await self.repository.list_by_technology(technology)
        return [Project.from_dict(row) for row in rows]

    async def get_project(self, project_id: int) -> Project:
        async def load():
            row = await self.repository.get_by_id(project_id)
            if not row:
                raise NotFoundError(f"Project not found with id: {project_id}")
            return Project.from_dict(row)
        return await self._cached(PROJECT, load, key=project_id)

    async def create_project(self, project: Project) -> Project:
        now = self._now()
        project = replace(project, id=None, created_at=now, updated_at=now)
        project_id = await self.repository.create(project.to_record())
        self._evict()
        logger.info(f"[ProjectService.create_project] Created project {project_id}")
        return replace(project, id=project_id)

    async def update_project(self, project_id: int, project: Project) -> Project:
        existing = await self.repository.get_by_id(project_id)
        if not existing:
            raise NotFoundError(f"Project not found with id: {project_id}")
        project = replace(
            project,
            id=project_id,
            created_at=existing.get("created_at"),
            updated_at=self._now()
        )
        if not await self.repository.update(project_id, project.to_record()):
            raise NotFoundError(f"Project not found with id: {project_id}")
        self._evict()
        logger.info(f"[ProjectService.update_project] Updated project {project_id}")
        return project

    async def delete_project(self, project_id: int) -> None:
        if not await self.repository.exists(project_id):
            raise NotFoundError(f"Project not found with id: {project_id}")
        await self.repository.delete(project_id)
        self._evict()
        logger.info(f"[ProjectService.delete_project] Deleted project {project_id}")
