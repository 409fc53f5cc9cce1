"""
Skill Domain Model
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from portfolio.modules.catalog.domain.base import pick, to_record, to_wire


@dataclass
class Skill:
    """A skill with an optional proficiency level."""
    name: str
    id: Optional[int] = None
    category: Optional[str] = None
    proficiency_level: Optional[int] = None
    icon_url: Optional[str] = None
    years_of_experience: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        return cls(**pick(cls, data))

    def to_record(self) -> Dict[str, Any]:
        return to_record(self)

    def to_dict(self) -> Dict[str, Any]:
        return to_wire(self)
