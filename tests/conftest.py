"""
Shared fixtures: in-memory repositories and signed test tokens.
"""
import time
from datetime import datetime
from typing import Any, Dict, List, Optional
import jwt
import pytest
from portfolio.modules.cache import ReadCache
from portfolio.modules.config import JwtSettings
from portfolio.modules.users.auth.tokens import TokenVerifier

TEST_SIGNING_KEY = "portfolio-test-signing-key-0123456789abcdef"


class InMemoryRepository:
    """Stores folded records keyed by id; mirrors CatalogRepository's surface."""

    collection_fields: tuple = ()

    def __init__(self):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.next_id = 1
        self.writes: List[str] = []
        self.reads = 0

    def _copy(self, record: Dict[str, Any]) -> Dict[str, Any]:
        copied = dict(record)
        for field in self.collection_fields:
            copied[field] = set(copied.get(field) or ())
        return copied

    def _all(self) -> List[Dict[str, Any]]:
        return [self._copy(self.rows[key]) for key in sorted(self.rows)]

    async def list(self) -> List[Dict[str, Any]]:
        self.reads += 1
        return self._all()

    async def get_by_id(self, record_id: int) -> Optional[Dict[str, Any]]:
        self.reads += 1
        record = self.rows.get(record_id)
        return self._copy(record) if record else None

    async def exists(self, record_id: int) -> bool:
        return record_id in self.rows

    async def create(self, record: Dict[str, Any]) -> int:
        record_id = self.next_id
        self.next_id += 1
        self.rows[record_id] = self._copy({**record, "id": record_id})
        self.writes.append(f"create:{record_id}")
        return record_id

    async def update(self, record_id: int, record: Dict[str, Any]) -> bool:
        if record_id not in self.rows:
            return False
        created_at = self.rows[record_id].get("created_at")
        self.rows[record_id] = self._copy({**record, "id": record_id, "created_at": created_at})
        self.writes.append(f"update:{record_id}")
        return True

    async def delete(self, record_id: int) -> bool:
        if self.rows.pop(record_id, None) is None:
            return False
        self.writes.append(f"delete:{record_id}")
        return True


class InMemoryProjectRepository(InMemoryRepository):
    collection_fields = ("technologies", "categories")

    async def list_featured(self):
        return [r for r in self._all() if r.get("featured")]

    async def list_by_category(self, category: str):
        return [r for r in self._all() if category in r["categories"]]

    async def list_by_technology(self, technology: str):
        return [r for r in self._all() if technology in r["technologies"]]


class InMemorySkillRepository(InMemoryRepository):

    async def list_by_category(self, category: str):
        return [r for r in self._all() if r.get("category") == category]

    async def list_by_min_proficiency(self, level: int):
        return [
            r for r in self._all()
            if r.get("proficiency_level") is not None and r["proficiency_level"] >= level
        ]


class InMemoryExperienceRepository(InMemoryRepository):
    collection_fields = ("responsibilities", "technologies")

    async def list(self):
        self.reads += 1
        return sorted(
            self._all(),
            key=lambda r: (r.get("start_date") is None, r.get("start_date") or datetime.min),
            reverse=True
        )

    async def list_current(self):
        return [r for r in await self.list() if r.get("current")]


class InMemoryUserProfileRepository(InMemoryRepository):

    async def get_by_username(self, username: str):
        for record in self._all():
            if record["username"] == username:
                return record
        return None

    async def username_exists(self, username: str) -> bool:
        return await self.get_by_username(username) is not None


def sign_token(roles=None, expires_in: int = 300, key: str = TEST_SIGNING_KEY, **claims) -> str:
    now = int(time.time())
    payload = {"sub": "user-1", "iat": now, "exp": now + expires_in, **claims}
    if roles is not None:
        payload["realm_access"] = {"roles": list(roles)}
    return jwt.encode(payload, key, algorithm="HS256")


@pytest.fixture
def make_token():
    """Factory for HS256 tokens signed with the test key."""
    return sign_token


@pytest.fixture
def cache():
    return ReadCache()


@pytest.fixture
def project_repository():
    return InMemoryProjectRepository()


@pytest.fixture
def skill_repository():
    return InMemorySkillRepository()


@pytest.fixture
def experience_repository():
    return InMemoryExperienceRepository()


@pytest.fixture
def profile_repository():
    return InMemoryUserProfileRepository()


@pytest.fixture
def token_verifier():
    return TokenVerifier(JwtSettings(public_key=TEST_SIGNING_KEY, algorithms=["HS256"]))


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {sign_token(['ADMIN', 'offline_access'])}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {sign_token(['client'])}"}
