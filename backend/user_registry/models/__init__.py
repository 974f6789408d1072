"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model imported here so Base.metadata is complete for create_all/alembic
"""

from user_registry.models.user import User  # noqa: F401
