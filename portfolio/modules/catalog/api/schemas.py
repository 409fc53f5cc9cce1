"""
Request Models

Validated request bodies for the admin write endpoints. Keys are accepted in
camelCase (as sent by the frontend) or snake_case.
"""
from datetime import datetime, timezone
from typing import Annotated, Optional, Set
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Columns are TIMESTAMP WITHOUT TIME ZONE
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


Timestamp = Annotated[Optional[datetime], AfterValidator(_naive_utc)]


class CatalogRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ProjectRequest(CatalogRequest):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    summary: Optional[str] = Field(None, max_length=1000)
    github_url: Optional[str] = Field(None, max_length=255)
    live_url: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = Field(None, max_length=2000)
    start_date: Timestamp = None
    end_date: Timestamp = None
    featured: bool = False
    technologies: Set[str] = Field(default_factory=set)
    categories: Set[str] = Field(default_factory=set)


class SkillRequest(CatalogRequest):
    name: str = Field(min_length=1, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    proficiency_level: Optional[int] = None
    icon_url: Optional[str] = Field(None, max_length=1000)
    years_of_experience: Optional[int] = Field(None, ge=0)


class ExperienceRequest(CatalogRequest):
    company: str = Field(min_length=1, max_length=255)
    position: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    location: Optional[str] = Field(None, max_length=255)
    start_date: Timestamp = None
    end_date: Timestamp = None
    current: bool = False
    company_logo_url: Optional[str] = Field(None, max_length=1000)
    responsibilities: Set[str] = Field(default_factory=set)
    technologies: Set[str] = Field(default_factory=set)


class UserProfileRequest(CatalogRequest):
    full_name: str = Field(min_length=1, max_length=255)
    username: str = Field(min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=1000)
    title: Optional[str] = Field(None, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    github_url: Optional[str] = Field(None, max_length=255)
    linkedin_url: Optional[str] = Field(None, max_length=255)
    twitter_url: Optional[str] = Field(None, max_length=255)
    website_url: Optional[str] = Field(None, max_length=255)
    resume_url: Optional[str] = Field(None, max_length=1000)
    profile_image_url: Optional[str] = Field(None, max_length=2000)
