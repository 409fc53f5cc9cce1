"""
Shared helpers for catalog domain models.
"""
from dataclasses import fields
from datetime import datetime
from typing import Any, Dict, Set
from pydantic.alias_generators import to_camel

# Maintained by the service layer, never taken from client input.
SYSTEM_FIELDS = ("id", "created_at", "updated_at")


def serialize(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return value


def to_wire(entity) -> Dict[str, Any]:
    """Dataclass -> camelCase JSON-ready dict."""
    return {to_camel(f.name): serialize(getattr(entity, f.name)) for f in fields(entity)}


def to_record(entity) -> Dict[str, Any]:
    """Dataclass -> snake_case dict of column values (no id)."""
    return {f.name: getattr(entity, f.name) for f in fields(entity) if f.name != "id"}


def pick(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


def as_set(value: Any) -> Set[str]:
    if not value:
        return set()
    return set(value)
