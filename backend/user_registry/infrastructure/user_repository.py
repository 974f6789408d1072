"""SQL User Repository — UserRepository implementation over an AsyncSession.

Invariants:
    - Implements core/repository_protocols.UserRepository
    - find_first ORs the match clauses and returns the lowest id among matches
    - create commits exactly one row; IntegrityError → DuplicateRecordError
      after rollback, so the session stays usable

Design Decisions:
    - Match fields resolved through FILTERABLE_FIELDS only: a clause can never
      name an arbitrary column
"""

import logging
from typing import Mapping

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.core.build_filters import UserMatch
from user_registry.core.domain_types import FILTERABLE_FIELDS, USER_FIELDS, UserId
from user_registry.core.errors import DuplicateRecordError
from user_registry.models.user import User

logger = logging.getLogger(__name__)

_COLUMNS = {name: getattr(User, name) for name in FILTERABLE_FIELDS}

# INTEGER primary key range
_MAX_ID = 2**31 - 1


class SqlUserRepository:
    """User persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_many(self, limit: int | None = None) -> list[User]:
        stmt = select(User).order_by(User.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_unique(self, user_id: UserId) -> User | None:
        if not 0 < user_id <= _MAX_ID:
            return None
        return await self.db.get(User, user_id)

    async def find_first(self, match: UserMatch) -> User | None:
        if match.is_empty:
            raise ValueError("find_first requires at least one clause")
        condition = or_(*(_COLUMNS[f] == v for f, v in match.clauses))
        result = await self.db.execute(
            select(User).where(condition).order_by(User.id).limit(1),
        )
        return result.scalars().first()

    async def create(self, fields: Mapping[str, str]) -> User:
        user = User(**{key: fields[key] for key in USER_FIELDS})
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Unique constraint rejected user insert: {e.orig}")
            raise DuplicateRecordError(
                "User violates a unique constraint",
            ) from e
        await self.db.refresh(user)
        return user
