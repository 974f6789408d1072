"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO goes through UserRepository; no raw queries outside it
    - create() raises DuplicateRecordError on a unique-constraint violation

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no inheritance
    - Async in Protocol: implementations do IO; the shell awaits them around
      the pure core functions
"""

from typing import Mapping, Protocol

from user_registry.core.build_filters import UserMatch
from user_registry.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for user records returned by a repository."""
    id: int
    name: str
    login: str
    email: str
    password: str


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def find_many(self, limit: int | None = None) -> list[UserLike]: ...
    async def find_unique(self, user_id: UserId) -> UserLike | None: ...
    async def find_first(self, match: UserMatch) -> UserLike | None: ...
    async def create(self, fields: Mapping[str, str]) -> UserLike: ...
