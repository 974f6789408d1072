"""SQL User Repository — persistence primitives against in-memory SQLite.

Tests cover:
    - create assigns ids and persists all four fields
    - unique indexes on login and email raise DuplicateRecordError
    - the session stays usable after a rejected insert
    - find_first ORs clauses and returns the lowest id
    - find_many orders by id and honours the limit
"""

import pytest

from user_registry.core.build_filters import UserMatch
from user_registry.core.errors import DuplicateRecordError
from user_registry.infrastructure.user_repository import SqlUserRepository


@pytest.fixture
def repo(test_db):
    return SqlUserRepository(test_db)


def _fields(login: str, email: str, name: str = "Alice Doe") -> dict:
    return {"name": name, "login": login, "email": email, "password": "Abcdef1!"}


async def test_create_assigns_id(repo):
    user = await repo.create(_fields("alice1", "a@x.com"))
    assert user.id is not None
    fetched = await repo.find_unique(user.id)
    assert fetched.login == "alice1"
    assert fetched.password == "Abcdef1!"


async def test_duplicate_login_raises(repo):
    await repo.create(_fields("alice1", "a@x.com"))
    with pytest.raises(DuplicateRecordError):
        await repo.create(_fields("alice1", "other@x.com"))


async def test_duplicate_email_raises(repo):
    await repo.create(_fields("alice1", "a@x.com"))
    with pytest.raises(DuplicateRecordError):
        await repo.create(_fields("alice2", "a@x.com"))


async def test_session_usable_after_duplicate(repo):
    await repo.create(_fields("alice1", "a@x.com"))
    with pytest.raises(DuplicateRecordError):
        await repo.create(_fields("alice1", "a@x.com"))
    user = await repo.create(_fields("bob123", "b@x.com"))
    assert user.login == "bob123"
    assert len(await repo.find_many()) == 2


async def test_find_unique_missing_returns_none(repo):
    assert await repo.find_unique(99999) is None


async def test_find_unique_out_of_range_returns_none(repo):
    assert await repo.find_unique(0) is None
    assert await repo.find_unique(2**40) is None


async def test_find_first_is_disjunctive(repo):
    await repo.create(_fields("alice1", "a@x.com"))
    bob = await repo.create(_fields("bob123", "b@x.com"))
    match = UserMatch(clauses=(("login", "nobody"), ("email", "b@x.com")))
    assert (await repo.find_first(match)).id == bob.id


async def test_find_first_returns_lowest_id(repo):
    first = await repo.create(_fields("alice1", "a@x.com", name="Same Name"))
    await repo.create(_fields("alice2", "c@x.com", name="Same Name"))
    match = UserMatch(clauses=(("name", "Same Name"),))
    assert (await repo.find_first(match)).id == first.id


async def test_find_first_no_match(repo):
    match = UserMatch(clauses=(("login", "nobody"),))
    assert await repo.find_first(match) is None


async def test_find_first_rejects_empty_match(repo):
    with pytest.raises(ValueError):
        await repo.find_first(UserMatch(clauses=()))


async def test_find_many_orders_and_limits(repo):
    for i in range(3):
        await repo.create(_fields(f"user{i}x", f"u{i}@x.com"))
    users = await repo.find_many(limit=2)
    assert [u.login for u in users] == ["user0x", "user1x"]
    assert len(await repo.find_many()) == 3
