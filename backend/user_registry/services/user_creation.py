"""Creation Pipeline — turns an untrusted payload into a persisted user or a rejection.

Invariants:
    - Stages run strictly in order: shape → schema → uniqueness → persist
    - Each stage short-circuits; no store call before the uniqueness stage
    - Exactly one insert per accepted payload, with the normalized field values
    - A unique violation raised by the store maps to the same DUPLICATE_CONFLICT
      outcome as the pre-insert check
    - No state kept between calls besides the injected collaborators
"""

import logging
from typing import Any

from user_registry.core.check_payload_shape import check_payload_shape
from user_registry.core.domain_types import (
    USER_FIELDS, PayloadShapePolicy, RejectionReason,
)
from user_registry.core.errors import DuplicateRecordError
from user_registry.core.outcomes import CreationOutcome, Created, Invalid, Rejected
from user_registry.core.repository_protocols import UserRepository
from user_registry.core.validate_schema import validate_payload
from user_registry.schemas.user import UserCreate
from user_registry.services.check_uniqueness import check_uniqueness

logger = logging.getLogger(__name__)


class UserCreationPipeline:
    """Validates and persists new users."""

    def __init__(
        self,
        repository: UserRepository,
        shape_policy: PayloadShapePolicy = PayloadShapePolicy.EXACT_KEYS,
    ):
        self.repository = repository
        self.shape_policy = shape_policy

    async def create(self, payload: Any) -> CreationOutcome:
        if not check_payload_shape(payload, self.shape_policy):
            return self._reject(RejectionReason.MALFORMED_PAYLOAD, stage="shape")

        validation = validate_payload(UserCreate, payload)
        if isinstance(validation, Invalid):
            return self._reject(
                RejectionReason.FIELD_VALIDATION_FAILED,
                stage="schema",
                errors=validation.errors,
            )
        fields = {key: validation.data[key] for key in USER_FIELDS}

        uniqueness = await check_uniqueness(
            self.repository, fields["login"], fields["email"],
        )
        if uniqueness.conflict:
            return self._reject(
                RejectionReason.DUPLICATE_CONFLICT, stage="uniqueness",
            )

        try:
            user = await self.repository.create(fields)
        except DuplicateRecordError:
            # Lost the race between the uniqueness check and the insert
            return self._reject(
                RejectionReason.DUPLICATE_CONFLICT, stage="persist",
            )

        logger.info("User created", extra={"user_id": user.id})
        return Created(user=user)

    def _reject(
        self, reason: RejectionReason, stage: str, errors: tuple = (),
    ) -> Rejected:
        logger.info(
            f"User creation rejected at {stage} stage: {reason.value}",
            extra={"stage": stage, "reason": reason.value},
        )
        return Rejected(reason=reason, errors=errors)
