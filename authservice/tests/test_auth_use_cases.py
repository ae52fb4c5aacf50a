from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.register_user import RegisterUserUseCase
from authservice.application.use_cases.users.verify_token import VerifyTokenUseCase
from authservice.domain.users.entities import IssuedToken, User
from authservice.domain.users.exceptions import (InvalidCredentialsError,
                                                 TokenRequiredError)
from authservice.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from authservice.shared.errors import StorageError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: list[User] = []
        self._seq = 1

    def add(self, user: User) -> User:
        stored = replace(user, id=self._seq)
        self._seq += 1
        self._users.append(stored)
        return stored

    def find_by(self, **criteria: Any) -> Sequence[User]:
        return [
            user
            for user in self._users
            if all(getattr(user, key) == value for key, value in criteria.items())
        ]


class FailingUserRepository(UserRepository):
    def add(self, user: User) -> User:
        raise StorageError("users.add", detail="disk I/O error")

    def find_by(self, **criteria: Any) -> Sequence[User]:
        raise StorageError("users.find_by", detail="disk I/O error")


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class StubTokenIssuer(TokenIssuer):
    def issue(self, user: User) -> IssuedToken:
        now = datetime.now(UTC)
        return IssuedToken(
            token=f"token-{user.username}",
            username=user.username,
            issued_at=now,
            expires_at=now + timedelta(hours=1),
        )

    def decode(self, token: str) -> dict[str, Any]:
        return {"subject": "user", "username": token.removeprefix("token-")}


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def _register(users: UserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


def _login(users: UserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, password_hasher=DeterministicHasher(), tokens=StubTokenIssuer()
    )


def test_register_user_replaces_password_with_digest(users: InMemoryUserRepository) -> None:
    user = _register(users).execute("alice", "secret")

    assert user.id == 1
    assert user.username == "alice"
    assert user.password_hash == "hashed:secret"
    assert user.password_hash != "secret"


def test_register_user_keeps_extra_fields(users: InMemoryUserRepository) -> None:
    user = _register(users).execute("alice", "secret", {"department": "finance"})

    record = user.as_record()
    assert record == {
        "id": 1,
        "username": "alice",
        "password": "hashed:secret",
        "department": "finance",
    }


def test_register_user_does_not_guard_duplicates(users: InMemoryUserRepository) -> None:
    register = _register(users)
    register.execute("alice", "secret")
    register.execute("alice", "other")

    assert len(users.find_by(username="alice")) == 2


def test_register_user_propagates_storage_error() -> None:
    with pytest.raises(StorageError):
        _register(FailingUserRepository()).execute("alice", "secret")


def test_login_user_success(users: InMemoryUserRepository) -> None:
    _register(users).execute("alice", "secret")

    result = _login(users).execute("alice", "secret")

    assert result.user.username == "alice"
    assert result.token.token == "token-alice"


def test_login_user_uses_first_matching_record(users: InMemoryUserRepository) -> None:
    register = _register(users)
    register.execute("alice", "first")
    register.execute("alice", "second")

    assert _login(users).execute("alice", "first").user.id == 1
    with pytest.raises(InvalidCredentialsError):
        _login(users).execute("alice", "second")


def test_login_user_wrong_password(users: InMemoryUserRepository) -> None:
    _register(users).execute("alice", "secret")

    with pytest.raises(InvalidCredentialsError) as excinfo:
        _login(users).execute("alice", "wrong")

    assert excinfo.value.to_dict()["message"] == "Invalid Credentials"


def test_login_user_unknown_username_matches_wrong_password(
    users: InMemoryUserRepository,
) -> None:
    _register(users).execute("alice", "secret")

    with pytest.raises(InvalidCredentialsError) as unknown:
        _login(users).execute("bob", "secret")
    with pytest.raises(InvalidCredentialsError) as mismatch:
        _login(users).execute("alice", "wrong")

    assert unknown.value.to_dict() == mismatch.value.to_dict()
    assert unknown.value.status == mismatch.value.status == 401


def test_login_user_propagates_storage_error() -> None:
    with pytest.raises(StorageError):
        _login(FailingUserRepository()).execute("alice", "secret")


def test_verify_token_requires_token() -> None:
    verify = VerifyTokenUseCase(tokens=StubTokenIssuer())

    with pytest.raises(TokenRequiredError):
        verify.execute(None)

    assert verify.execute("token-alice")["username"] == "alice"
