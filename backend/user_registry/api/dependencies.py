"""API Dependencies — wires repository and services into routes via FastAPI Depends.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - Policies read from Settings; services never read config themselves
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.config import Settings, get_settings
from user_registry.infrastructure.database import get_db
from user_registry.infrastructure.user_repository import SqlUserRepository
from user_registry.services.user_creation import UserCreationPipeline
from user_registry.services.user_lookup import UserLookup


def get_user_repository(db: AsyncSession = Depends(get_db)) -> SqlUserRepository:
    return SqlUserRepository(db)


def get_creation_pipeline(
    repository: SqlUserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> UserCreationPipeline:
    return UserCreationPipeline(repository, settings.payload_shape_policy)


def get_user_lookup(
    repository: SqlUserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> UserLookup:
    return UserLookup(
        repository,
        list_limit=settings.user_list_limit,
        empty_policy=settings.empty_list_policy,
    )
