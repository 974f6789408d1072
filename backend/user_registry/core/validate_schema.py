"""Schema Validation — checks a raw payload against a declarative pydantic schema.

Invariants:
    - validate_payload is PURE: never touches the store, never raises for bad input
    - All violations collected in one pass (pydantic validates every field)
    - Exactly one FieldError per violated field, in schema declaration order
    - Messages come from the schema's error_messages table, falling back to pydantic's

Design Decisions:
    - Generic over any BaseModel subclass: the same function validates bodies,
      path params, or query maps
    - pydantic's ValidationError is caught here and converted to Invalid, so
      callers only ever branch on the returned outcome
"""

from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from user_registry.core.outcomes import FieldError, Invalid, Valid, ValidationOutcome


def validate_payload(
    schema: type[BaseModel], payload: Mapping[str, Any],
) -> ValidationOutcome:
    """Validate payload against schema. Returns Valid(normalized) or Invalid(errors)."""
    try:
        model = schema.model_validate(dict(payload))
    except ValidationError as exc:
        return Invalid(errors=_collect_field_errors(schema, exc))
    return Valid(data=model.model_dump())


def _collect_field_errors(
    schema: type[BaseModel], exc: ValidationError,
) -> tuple[FieldError, ...]:
    messages: dict[tuple[str, str], str] = getattr(schema, "error_messages", {})
    by_field: dict[str, FieldError] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field in by_field:
            continue
        template = messages.get((field, error["type"]))
        message = (
            template.format(**error.get("ctx", {})) if template else error["msg"]
        )
        by_field[field] = FieldError(field=field, message=message)

    order = list(schema.model_fields)
    return tuple(sorted(
        by_field.values(),
        key=lambda e: order.index(e.field) if e.field in order else len(order),
    ))
