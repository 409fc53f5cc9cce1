"""
Project Domain Model
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Set
from portfolio.modules.catalog.domain.base import as_set, pick, to_record, to_wire


@dataclass
class Project:
    """A portfolio project."""
    title: str
    id: Optional[int] = None
    description: Optional[str] = None
    summary: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    image_url: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    featured: bool = False
    technologies: Set[str] = field(default_factory=set)
    categories: Set[str] = field(default_factory=set)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Create Project from dictionary (e.g., from a folded database row)."""
        values = pick(cls, data)
        values["featured"] = bool(values.get("featured") or False)
        values["technologies"] = as_set(values.get("technologies"))
        values["categories"] = as_set(values.get("categories"))
        return cls(**values)

    def to_record(self) -> Dict[str, Any]:
        return to_record(self)

    def to_dict(self) -> Dict[str, Any]:
        return to_wire(self)
