"""Lookup Filters — parses identifiers and builds disjunctive matches from query maps.

Invariants:
    - parse_user_id returns None for anything that is not a base-10 integer
    - build_user_match keeps only FILTERABLE_FIELDS with non-blank values
    - A UserMatch with no clauses is never handed to the store
    - Clause order follows FILTERABLE_FIELDS, not the caller's query order

Design Decisions:
    - UserMatch is data (field, value pairs), not a SQL expression: the store
      decides how to OR the clauses, core stays free of SQLAlchemy
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping

from user_registry.core.domain_types import FILTERABLE_FIELDS, UserId


_INTEGER_ID = re.compile(r"^\s*[+-]?\d+\s*$")


@dataclass(frozen=True)
class UserMatch:
    """Logical OR of equality clauses over user fields."""
    clauses: tuple[tuple[str, str], ...]

    @property
    def is_empty(self) -> bool:
        return not self.clauses

    def describe(self) -> str:
        return " or ".join(f"{f}={v!r}" for f, v in self.clauses)


def parse_user_id(raw: Any) -> UserId | None:
    """Parse a path identifier. None when it is not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return UserId(raw)
    if not isinstance(raw, str) or not _INTEGER_ID.match(raw):
        return None
    return UserId(int(raw))


def build_user_match(query: Mapping[str, Any]) -> UserMatch:
    """Build a disjunctive match from the provided query attributes."""
    clauses = []
    for field in FILTERABLE_FIELDS:
        value = query.get(field)
        if isinstance(value, str) and value.strip():
            clauses.append((field, value.strip()))
    return UserMatch(clauses=tuple(clauses))


def uniqueness_match(login: str, email: str) -> UserMatch:
    """Match any user sharing the login OR the email."""
    return UserMatch(clauses=(("login", login), ("email", email)))
