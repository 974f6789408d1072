"""Error Hierarchy — typed, categorized exceptions for all user registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable by the caller; infrastructure
      errors (500-level) abort the current request only
    - to_response() produces the REST envelope; field errors stay an ordered list
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RegistryError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Sequence

from user_registry.core.domain_types import RejectionReason
from user_registry.core.outcomes import FieldError, Rejected


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None


class RegistryError(Exception):
    """Base exception for all user registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def details(self) -> list[dict] | None:
        """Structured per-item details; None when the error has none."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        details = self.details()
        if details is not None:
            body["details"] = details
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class MalformedInputError(RegistryError):
    """Caller supplied an unusable shape (bad id, no filters, wrong keys)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class FieldValidationError(RegistryError):
    """Well-formed payload violating one or more field constraints."""
    def __init__(
        self, errors: Sequence[FieldError], context: ErrorContext | None = None,
    ):
        super().__init__(
            "One or more fields are invalid.",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = tuple(errors)

    def details(self) -> list[dict]:
        return [e.to_dict() for e in self.errors]


class DuplicateUserError(RegistryError):
    """A user with the same login and/or email already exists."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "A user with the same login and/or email is already registered.",
            "DUPLICATE_USER", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class DuplicateRecordError(RegistryError):
    """Store rejected an insert on a unique constraint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DUPLICATE_RECORD", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class UserNotFoundError(RegistryError):
    """Well-formed lookup with no matching user."""
    def __init__(self, lookup: str, context: ErrorContext | None = None):
        super().__init__(
            f"User not found ({lookup}).",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


class NoUsersRegisteredError(RegistryError):
    """Listing requested while the store holds no users."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No users registered.",
            "NO_USERS", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Outcome → Error ────────────────────────────────────────────

MALFORMED_PAYLOAD_MESSAGE = (
    'Invalid payload. Please provide exactly "name", "login", "email" and "password".'
)


def error_for_rejection(outcome: Rejected) -> RegistryError:
    """Map a rejected creation outcome to the error the API reports."""
    if outcome.reason is RejectionReason.MALFORMED_PAYLOAD:
        return MalformedInputError(MALFORMED_PAYLOAD_MESSAGE)
    if outcome.reason is RejectionReason.FIELD_VALIDATION_FAILED:
        return FieldValidationError(outcome.errors)
    return DuplicateUserError()
