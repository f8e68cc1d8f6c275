from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from authservice.domain.users.entities import Identity
from authservice.infrastructure.sessions.memory_session_store import InMemorySessionStore
from authservice.infrastructure.sessions.sqlalchemy_session_store import SqlAlchemySessionStore

ANA = Identity(user_id=1, name="Ana", email="ana@x.com")
BOB = Identity(user_id=2, name="Bob", email="bob@x.com")


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(params=["memory", "database"])
def store(request: pytest.FixtureRequest, clock: FakeClock):
    if request.param == "database":
        request.getfixturevalue("reset_database")
        return SqlAlchemySessionStore(lifetime=timedelta(hours=24), clock=clock)
    return InMemorySessionStore(lifetime=timedelta(hours=24), clock=clock)


def test_created_session_is_readable(store) -> None:
    session = store.create(ANA)

    found = store.get(session.session_id)

    assert found is not None
    assert found.identity == ANA


def test_session_survives_until_lifetime_elapses(store, clock: FakeClock) -> None:
    session = store.create(ANA)

    clock.advance(hours=23, minutes=59)
    assert store.get(session.session_id) is not None

    clock.advance(minutes=1)
    assert store.get(session.session_id) is None


def test_revoke_removes_session_and_is_idempotent(store) -> None:
    session = store.create(ANA)

    store.revoke(session.session_id)
    store.revoke(session.session_id)

    assert store.get(session.session_id) is None


def test_unknown_session_is_none(store) -> None:
    assert store.get("does-not-exist") is None


def test_new_session_replaces_users_previous_one(store) -> None:
    first = store.create(ANA)
    other = store.create(BOB)
    second = store.create(ANA)

    assert store.get(first.session_id) is None
    assert store.get(second.session_id) is not None
    assert store.get(other.session_id) is not None


def test_clear_drops_every_session(store) -> None:
    a = store.create(ANA)
    b = store.create(BOB)

    assert store.clear() == 2
    assert store.get(a.session_id) is None
    assert store.get(b.session_id) is None
