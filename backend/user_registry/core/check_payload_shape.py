"""Structural Check — verifies a creation payload has the expected key set.

Invariants:
    - Non-mapping payloads (list, str, None, ...) are always malformed
    - EXACT_KEYS: key set equals USER_FIELDS, no more, no less
    - ALL_TRUTHY: every USER_FIELDS key present with a truthy value; extra keys ignored
    - Runs before schema validation and before any store call
"""

from typing import Any, Mapping

from user_registry.core.domain_types import USER_FIELDS, PayloadShapePolicy


def check_payload_shape(payload: Any, policy: PayloadShapePolicy) -> bool:
    """True when payload passes the structural check under policy."""
    if not isinstance(payload, Mapping):
        return False
    if policy is PayloadShapePolicy.EXACT_KEYS:
        return set(payload.keys()) == set(USER_FIELDS)
    return all(payload.get(key) for key in USER_FIELDS)
