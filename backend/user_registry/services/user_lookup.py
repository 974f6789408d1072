"""Lookup Dispatcher — list, get-by-id and get-by-query over the user store.

Invariants:
    - Three response classes per get: malformed (400), not found (404), found
    - Input is parsed before any store call; malformed input never reaches the store
    - Empty listing follows one EmptyListPolicy per instance
    - Read-only: no writes, so repeated calls without writes return the same result
"""

import logging
from typing import Any, Mapping

from user_registry.core.build_filters import build_user_match, parse_user_id
from user_registry.core.domain_types import EmptyListPolicy
from user_registry.core.errors import (
    ErrorContext, MalformedInputError, NoUsersRegisteredError, UserNotFoundError,
)
from user_registry.core.repository_protocols import UserLike, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 20

NO_FILTER_MESSAGE = (
    'No query parameter was provided. Please provide "name", "login" or "email".'
)


class UserLookup:
    """Read paths for the user resource."""

    def __init__(
        self,
        repository: UserRepository,
        list_limit: int | None = DEFAULT_LIST_LIMIT,
        empty_policy: EmptyListPolicy = EmptyListPolicy.NO_CONTENT,
    ):
        self.repository = repository
        self.list_limit = list_limit
        self.empty_policy = empty_policy

    async def list_users(self) -> list[UserLike]:
        """All users up to list_limit. Empty list only under NO_CONTENT policy."""
        users = await self.repository.find_many(limit=self.list_limit)
        if not users and self.empty_policy is EmptyListPolicy.NOT_FOUND:
            raise NoUsersRegisteredError()
        return users

    async def get_by_id(self, raw_id: Any) -> UserLike:
        user_id = parse_user_id(raw_id)
        if user_id is None:
            raise MalformedInputError(
                f"User id must be an integer, got {raw_id!r}.",
            )
        user = await self.repository.find_unique(user_id)
        if user is None:
            raise UserNotFoundError(
                f"id={user_id}", ErrorContext(user_id=user_id),
            )
        return user

    async def get_by_query(self, query: Mapping[str, Any]) -> UserLike:
        """First user matching any of the provided name/login/email values."""
        match = build_user_match(query)
        if match.is_empty:
            raise MalformedInputError(NO_FILTER_MESSAGE)
        user = await self.repository.find_first(match)
        if user is None:
            logger.debug(f"No user matched {match.describe()}")
            raise UserNotFoundError(match.describe())
        return user
