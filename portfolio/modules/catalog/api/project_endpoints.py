"""
Project API Endpoints

Public reads under /api/public/projects, admin writes under
/api/admin/projects.
"""
import logging
from fastapi import APIRouter, Depends
from portfolio.modules.catalog.api.schemas import ProjectRequest
from portfolio.modules.catalog.domain.project import Project
from portfolio.modules.catalog.services.project_service import ProjectService
from portfolio.modules.users.auth.middleware import require_admin

logger = logging.getLogger("portfolio.catalog.projects.api")

router = APIRouter(prefix="/api", tags=["projects"])

# Service instance
_project_service = ProjectService()


@router.get("/public/projects")
async def list_projects():
    projects = await _project_service.list_projects()
    return [project.to_dict() for project in projects]


@router.get("/public/projects/featured")
async def list_featured_projects():
    projects = await _project_service.list_featured_projects()
    return [project.to_dict() for project in projects]


@router.get("/public/projects/category/{category}")
async def list_projects_by_category(category: str):
    projects = await _project_service.list_projects_by_category(category)
    return [project.to_dict() for project in projects]


@router.get("/public/projects/technology/{technology}")
async def list_projects_by_technology(technology: str):
    projects = await _project_service.list_projects_by_technology(technology)
    return [project.to_dict() for project in projects]


@router.get("/public/projects/{project_id}")
async def get_project(project_id: int):
    project = await _project_service.get_project(project_id)
    return project.to_dict()


@router.post("/admin/projects", status_code=201, dependencies=[Depends(require_admin)])
async def create_project(request: ProjectRequest):
    logger.debug(f"[project_endpoints.create_project] title={request.title}")
    project = await _project_service.create_project(Project(**request.model_dump()))
    return project.to_dict()


@router.put("/admin/projects/{project_id}", dependencies=[Depends(require_admin)])
async def update_project(project_id: int, request: ProjectRequest):
    project = await _project_service.update_project(project_id, Project(**request.model_dump()))
    return project.to_dict()


@router.delete("/admin/projects/{project_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_project(project_id: int):
    await _project_service.delete_project(project_id)
    return None
