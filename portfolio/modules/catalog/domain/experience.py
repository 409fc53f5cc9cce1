"""
Experience Domain Model
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Set
from portfolio.modules.catalog.domain.base import as_set, pick, to_record, to_wire


@dataclass
class Experience:
    """A position held at a company."""
    company: str
    position: str
    id: Optional[int] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    current: bool = False
    company_logo_url: Optional[str] = None
    responsibilities: Set[str] = field(default_factory=set)
    technologies: Set[str] = field(default_factory=set)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Experience":
        values = pick(cls, data)
        values["current"] = bool(values.get("current") or False)
        values["responsibilities"] = as_set(values.get("responsibilities"))
        values["technologies"] = as_set(values.get("technologies"))
        return cls(**values)

    def to_record(self) -> Dict[str, Any]:
        return to_record(self)

    def to_dict(self) -> Dict[str, Any]:
        return to_wire(self)
