"""Outcomes — tagged result types returned by validation and creation.

Invariants:
    - ValidationOutcome is exactly Valid | Invalid
    - CreationOutcome is exactly Created | Rejected
    - Invalid.errors is never empty and keeps schema field order
    - All outcome types are frozen (safe to share, compare, and log)

Design Decisions:
    - Return values over exceptions for expected rejections: callers branch with
      isinstance() and the shell decides how to render them
"""

from dataclasses import dataclass, field
from typing import Any, Union

from user_registry.core.domain_types import RejectionReason


@dataclass(frozen=True)
class FieldError:
    """A single violated field constraint."""
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Valid:
    """Payload accepted. `data` holds the normalized field values."""
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Invalid:
    """Payload rejected with one FieldError per violated field."""
    errors: tuple[FieldError, ...]


ValidationOutcome = Union[Valid, Invalid]


@dataclass(frozen=True)
class Created:
    """Record persisted by the store."""
    user: Any


@dataclass(frozen=True)
class Rejected:
    """Payload refused before (or instead of) persistence."""
    reason: RejectionReason
    errors: tuple[FieldError, ...] = ()


CreationOutcome = Union[Created, Rejected]
