"""
Experience API Endpoints
"""
import logging
from fastapi import APIRouter, Depends
from portfolio.modules.catalog.api.schemas import ExperienceRequest
from portfolio.modules.catalog.domain.experience import Experience
from portfolio.modules.catalog.services.experience_service import ExperienceService
from portfolio.modules.users.auth.middleware import require_admin

logger = logging.getLogger("portfolio.catalog.experiences.api")

router = APIRouter(prefix="/api", tags=["experiences"])

# Service instance
_experience_service = ExperienceService()


@router.get("/public/experiences")
async def list_experiences():
    experiences = await _experience_service.list_experiences()
    return [experience.to_dict() for experience in experiences]


@router.get("/public/experiences/current")
async def list_current_experiences():
    experiences = await _experience_service.list_current_experiences()
    return [experience.to_dict() for experience in experiences]


@router.get("/public/experiences/{experience_id}")
async def get_experience(experience_id: int):
    experience = await _experience_service.get_experience(experience_id)
    return experience.to_dict()


@router.post("/admin/experiences", status_code=201, dependencies=[Depends(require_admin)])
async def create_experience(request: ExperienceRequest):
    experience = await _experience_service.create_experience(Experience(**request.model_dump()))
    return experience.to_dict()


@router.put("/admin/experiences/{experience_id}", dependencies=[Depends(require_admin)])
async def update_experience(experience_id: int, request: ExperienceRequest):
    experience = await _experience_service.update_experience(
        experience_id, Experience(**request.model_dump())
    )
    return experience.to_dict()


@router.delete("/admin/experiences/{experience_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_experience(experience_id: int):
    await _experience_service.delete_experience(experience_id)
    return None
