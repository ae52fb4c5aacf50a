from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from authservice.domain.users.entities import User
from authservice.infrastructure.db import ENGINE, Base, init_db
from authservice.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from authservice.shared.errors import StorageError


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    init_db()
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


def _user(username: str, **profile: object) -> User:
    return User(
        id=0,
        username=username,
        password_hash="digest",
        created_at=datetime.now(UTC),
        profile=profile,
    )


def test_add_assigns_id_and_keeps_profile() -> None:
    repo = SqlAlchemyUserRepository()

    stored = repo.add(_user("alice", department="finance", age=41))

    assert stored.id > 0
    assert stored.username == "alice"
    assert dict(stored.profile) == {"department": "finance", "age": 41}


def test_find_by_username_returns_collection() -> None:
    repo = SqlAlchemyUserRepository()
    repo.add(_user("alice"))
    repo.add(_user("bob"))

    found = repo.find_by(username="bob")

    assert [user.username for user in found] == ["bob"]
    assert repo.find_by(username="nobody") == []


def test_find_by_rejects_unknown_filters() -> None:
    with pytest.raises(ValueError):
        SqlAlchemyUserRepository().find_by(password_hash="digest")


def test_database_errors_become_storage_errors() -> None:
    @contextmanager
    def broken_session():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))
        yield  # pragma: no cover

    repo = SqlAlchemyUserRepository(session_factory=broken_session)

    with pytest.raises(StorageError) as excinfo:
        repo.add(_user("alice"))
    assert excinfo.value.detail == "database is locked"
    assert excinfo.value.status == 500

    with pytest.raises(StorageError):
        repo.find_by(username="alice")
