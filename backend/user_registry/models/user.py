"""User ORM — persisted registry record.

Invariants:
    - id is an autoincrement integer assigned by the store
    - login and email each carry a unique index (backstop for concurrent creates)
    - password stored as given (opaque; no hashing here)
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from user_registry.db.base import Base


class User(Base):
    """A registered user."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    login: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True, index=True,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, login={self.login!r})"
