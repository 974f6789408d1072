"""Uniqueness Checker — looks for an existing user sharing a login or email.

Invariants:
    - Read-only: a single find_first call, no writes
    - Conflict when login matches OR email matches
    - Only called with values that already passed schema validation
"""

from dataclasses import dataclass

from user_registry.core.build_filters import uniqueness_match
from user_registry.core.repository_protocols import UserLike, UserRepository


@dataclass(frozen=True)
class UniquenessResult:
    conflict: bool
    existing: UserLike | None = None


async def check_uniqueness(
    repository: UserRepository, login: str, email: str,
) -> UniquenessResult:
    """Query the store for a user holding either value."""
    existing = await repository.find_first(uniqueness_match(login, email))
    return UniquenessResult(conflict=existing is not None, existing=existing)
