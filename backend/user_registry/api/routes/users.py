"""User Routes — list, get-by-id, get-by-query and create for the user resource.

Invariants:
    - Path ids and query maps reach the services raw; parsing happens in core
    - Creation body is read as raw JSON so the structural check sees it unmodified
    - Rejected creation outcomes are raised as RegistryError (global handler renders them)
    - Empty listing answers 204 with no body when the lookup allows it
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from user_registry.api.dependencies import get_creation_pipeline, get_user_lookup
from user_registry.core.errors import (
    MALFORMED_PAYLOAD_MESSAGE, MalformedInputError, error_for_rejection,
)
from user_registry.core.outcomes import Rejected
from user_registry.schemas.user import UserEnvelope, UserListEnvelope, UserResponse
from user_registry.services.user_creation import UserCreationPipeline
from user_registry.services.user_lookup import UserLookup

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["users"])


@router.get(
    "/users",
    response_model=UserListEnvelope,
    responses={204: {"description": "No users registered."}},
)
async def list_users(lookup: UserLookup = Depends(get_user_lookup)):
    users = await lookup.list_users()
    if not users:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return UserListEnvelope(
        users=[UserResponse.model_validate(u) for u in users],
    )


@router.get("/user", response_model=UserEnvelope)
async def get_user_by_query(
    request: Request, lookup: UserLookup = Depends(get_user_lookup),
):
    """First user whose name, login or email equals a provided value."""
    user = await lookup.get_by_query(dict(request.query_params))
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.get("/user/{user_id}", response_model=UserEnvelope)
async def get_user_by_id(
    user_id: str, lookup: UserLookup = Depends(get_user_lookup),
):
    user = await lookup.get_by_id(user_id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post(
    "/user",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: Request,
    pipeline: UserCreationPipeline = Depends(get_creation_pipeline),
):
    """Validate and persist a new user."""
    payload = await _read_json_body(request)
    outcome = await pipeline.create(payload)
    if isinstance(outcome, Rejected):
        raise error_for_rejection(outcome)
    return UserResponse.model_validate(outcome.user)


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise MalformedInputError(MALFORMED_PAYLOAD_MESSAGE) from None
