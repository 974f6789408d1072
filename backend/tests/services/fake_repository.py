"""In-memory UserRepository — counts every call so tests can assert store access.

Behaves like the SQL repository: ids assigned from 1, find_first returns the
lowest-id record matching any clause, create enforces login/email uniqueness
with DuplicateRecordError.
"""

from dataclasses import dataclass, field
from typing import Mapping

from user_registry.core.build_filters import UserMatch
from user_registry.core.domain_types import UNIQUE_FIELDS, USER_FIELDS
from user_registry.core.errors import DuplicateRecordError


@dataclass
class FakeUser:
    id: int
    name: str
    login: str
    email: str
    password: str


@dataclass
class FakeUserRepository:
    users: list[FakeUser] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    # Simulates a concurrent insert landing between find_first and create
    hide_from_find: bool = False

    def seed(self, **fields) -> FakeUser:
        user = FakeUser(id=len(self.users) + 1, **fields)
        self.users.append(user)
        return user

    async def find_many(self, limit: int | None = None) -> list[FakeUser]:
        self.calls.append("find_many")
        return list(self.users if limit is None else self.users[:limit])

    async def find_unique(self, user_id: int) -> FakeUser | None:
        self.calls.append("find_unique")
        return next((u for u in self.users if u.id == user_id), None)

    async def find_first(self, match: UserMatch) -> FakeUser | None:
        self.calls.append("find_first")
        if self.hide_from_find:
            return None
        for user in self.users:
            if any(getattr(user, f) == v for f, v in match.clauses):
                return user
        return None

    async def create(self, fields: Mapping[str, str]) -> FakeUser:
        self.calls.append("create")
        for existing in self.users:
            if any(getattr(existing, f) == fields[f] for f in UNIQUE_FIELDS):
                raise DuplicateRecordError("User violates a unique constraint")
        return self.seed(**{key: fields[key] for key in USER_FIELDS})
