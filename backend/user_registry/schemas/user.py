"""User Schemas — declarative field constraints and public response shapes.

Invariants:
    - UserCreate declares every creation constraint; the validator hardcodes none
    - Strings are stripped before any length or format rule runs
    - error_messages maps (field, pydantic error type) to the message callers see
    - UserResponse never exposes the password

Design Decisions:
    - Length bounds as Field(min_length/max_length) so pydantic reports them natively
    - Email shape via email-validator (same engine as pydantic's EmailStr), no DNS lookups
    - Password rule as a Python regex: lookaheads are outside pydantic's Rust regex engine
"""

import re
from typing import ClassVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


PASSWORD_SYMBOLS = "@$!%*?&"
PASSWORD_MIN_LENGTH = 6
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{6,}$",
)


class UserCreate(BaseModel):
    """Creation payload — field order here is the order errors are reported in."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=3, max_length=50)
    login: str = Field(min_length=4, max_length=20)
    email: str
    password: str

    error_messages: ClassVar[dict[tuple[str, str], str]] = {
        ("name", "string_type"): "Name must be a string.",
        ("name", "string_too_short"): "Name must have at least {min_length} characters.",
        ("name", "string_too_long"): "Name must have at most {max_length} characters.",
        ("login", "string_type"): "Login must be a string.",
        ("login", "string_too_short"): "Login must have at least {min_length} characters.",
        ("login", "string_too_long"): "Login must have at most {max_length} characters.",
        ("email", "string_type"): "Email must be a string.",
        ("email", "value_error"): "Invalid email.",
        ("password", "string_type"): "Password must be a string.",
        ("password", "value_error"): (
            f"Password must have at least {PASSWORD_MIN_LENGTH} characters, "
            "including one uppercase letter, one lowercase letter, one digit "
            f"and one special character ({PASSWORD_SYMBOLS})."
        ),
    }

    @field_validator("email")
    @classmethod
    def check_email_shape(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from None
        return v

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, v: str) -> str:
        if not PASSWORD_PATTERN.match(v):
            raise ValueError("password too weak")
        return v


class UserResponse(BaseModel):
    """User as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    login: str
    email: str


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListEnvelope(BaseModel):
    users: list[UserResponse]
