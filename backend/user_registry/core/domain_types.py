"""Domain Types — identity types, field sets and policy enums for the user registry.

Invariants:
    - USER_FIELDS is the single source of truth for the creation payload keys
    - FILTERABLE_FIELDS is the only set of columns a lookup may match on
    - Policies are str Enums so pydantic-settings can read them from env vars

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Field Sets ──────────────────────────────────────────────────

USER_FIELDS: tuple[str, ...] = ("name", "login", "email", "password")
UNIQUE_FIELDS: tuple[str, ...] = ("login", "email")
FILTERABLE_FIELDS: tuple[str, ...] = ("name", "login", "email")


# ─── Policies ────────────────────────────────────────────────────

class PayloadShapePolicy(str, Enum):
    """How strictly the creation payload's key set is checked."""
    EXACT_KEYS = "exact_keys"
    ALL_TRUTHY = "all_truthy"


class EmptyListPolicy(str, Enum):
    """Response class when the store holds no users at all."""
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"


class RejectionReason(str, Enum):
    """Why the creation pipeline refused a payload."""
    MALFORMED_PAYLOAD = "malformed_payload"
    FIELD_VALIDATION_FAILED = "field_validation_failed"
    DUPLICATE_CONFLICT = "duplicate_conflict"
