"""
Skill API Endpoints
"""
import logging
from fastapi import APIRouter, Depends
from portfolio.modules.catalog.api.schemas import SkillRequest
from portfolio.modules.catalog.domain.skill import Skill
from portfolio.modules.catalog.services.skill_service import SkillService
from portfolio.modules.users.auth.middleware import require_admin

logger = logging.getLogger("portfolio.catalog.skills.api")

router = APIRouter(prefix="/api", tags=["skills"])

# Service instance
_skill_service = SkillService()


@router.get("/public/skills")
async def list_skills():
    skills = await _skill_service.list_skills()
    return [skill.to_dict() for skill in skills]


@router.get("/public/skills/category/{category}")
async def list_skills_by_category(category: str):
    skills = await _skill_service.list_skills_by_category(category)
    return [skill.to_dict() for skill in skills]


@router.get("/public/skills/level/{level}")
async def list_skills_by_proficiency(level: int):
    """Skills at or above the given proficiency level."""
    skills = await _skill_service.list_skills_by_proficiency(level)
    return [skill.to_dict() for skill in skills]


@router.get("/public/skills/{skill_id}")
async def get_skill(skill_id: int):
    skill = await _skill_service.get_skill(skill_id)
    return skill.to_dict()


@router.post("/admin/skills", status_code=201, dependencies=[Depends(require_admin)])
async def create_skill(request: SkillRequest):
    skill = await _skill_service.create_skill(Skill(**request.model_dump()))
    return skill.to_dict()


@router.put("/admin/skills/{skill_id}", dependencies=[Depends(require_admin)])
async def update_skill(skill_id: int, request: SkillRequest):
    skill = await _skill_service.update_skill(skill_id, Skill(**request.model_dump()))
    return skill.to_dict()


@router.delete("/admin/skills/{skill_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_skill(skill_id: int):
    await _skill_service.delete_skill(skill_id)
    return None
