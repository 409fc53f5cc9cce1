"""
User Profile Domain Model

The public profile of the portfolio owner, looked up by username.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from portfolio.modules.catalog.domain.base import pick, to_record, to_wire


@dataclass
class UserProfile:
    """User profile domain model."""
    full_name: str
    username: str
    id: Optional[int] = None
    bio: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    twitter_url: Optional[str] = None
    website_url: Optional[str] = None
    resume_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        return cls(**pick(cls, data))

    def to_record(self) -> Dict[str, Any]:
        return to_record(self)

    def to_dict(self) -> Dict[str, Any]:
        return to_wire(self)
