"""
User Profile API Endpoints

Public lookup by username; everything else is admin only.
"""
import logging
from fastapi import APIRouter, Depends
from portfolio.modules.catalog.api.schemas import UserProfileRequest
from portfolio.modules.catalog.domain.user_profile import UserProfile
from portfolio.modules.catalog.services.user_profile_service import UserProfileService
from portfolio.modules.users.auth.middleware import require_admin

logger = logging.getLogger("portfolio.catalog.profiles.api")

router = APIRouter(prefix="/api", tags=["profiles"])

# Service instance
_profile_service = UserProfileService()


@router.get("/public/profiles/{username}")
async def get_public_profile(username: str):
    profile = await _profile_service.get_profile_by_username(username)
    return profile.to_dict()


@router.get("/admin/profiles", dependencies=[Depends(require_admin)])
async def list_profiles():
    profiles = await _profile_service.list_profiles()
    return [profile.to_dict() for profile in profiles]


@router.get("/admin/profiles/{profile_id}", dependencies=[Depends(require_admin)])
async def get_profile(profile_id: int):
    profile = await _profile_service.get_profile(profile_id)
    return profile.to_dict()


@router.post("/admin/profiles", status_code=201, dependencies=[Depends(require_admin)])
async def create_profile(request: UserProfileRequest):
    logger.debug(f"[profile_endpoints.create_profile] username={request.username}")
    profile = await _profile_service.create_profile(UserProfile(**request.model_dump()))
    return profile.to_dict()


@router.put("/admin/profiles/{profile_id}", dependencies=[Depends(require_admin)])
async def update_profile(profile_id: int, request: UserProfileRequest):
    profile = await _profile_service.update_profile(profile_id, UserProfile(**request.model_dump()))
    return profile.to_dict()


@router.delete("/admin/profiles/{profile_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_profile(profile_id: int):
    await _profile_service.delete_profile(profile_id)
    return None
