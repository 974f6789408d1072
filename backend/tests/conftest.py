"""Root conftest — shared test configuration and payload builders."""

import os

import pytest

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")


VALID_PAYLOAD = {
    "name": "Alice Doe",
    "login": "alice1",
    "email": "a@x.com",
    "password": "Abcdef1!",
}


@pytest.fixture
def valid_payload() -> dict:
    return dict(VALID_PAYLOAD)
