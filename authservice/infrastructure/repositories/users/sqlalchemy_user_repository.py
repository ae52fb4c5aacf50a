# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from types import MappingProxyType
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from authservice.domain.users.entities import User as DomainUser
from authservice.domain.users.repositories import UserRepository
from authservice.infrastructure.db.models import User
from authservice.infrastructure.db.session import session_scope
from authservice.shared.errors import StorageError

_FILTERABLE = {"id", "username"}


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
        profile=MappingProxyType(dict(row.profile or {})),
    )


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(operation, detail=str(getattr(exc, "orig", None) or exc)) from exc


class SqlAlchemyUserRepository(UserRepository):
    def __init__(
        self, session_factory: Callable[[], AbstractContextManager[Session]] = session_scope
    ) -> None:
        self._session_factory = session_factory

    def add(self, user: DomainUser) -> DomainUser:
        with _storage_errors("users.add"), self._session_factory() as session:
            row = User(
                username=user.username,
                password_hash=user.password_hash,
                profile=dict(user.profile),
                created_at=user.created_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def find_by(self, **criteria: Any) -> Sequence[DomainUser]:
        unknown = set(criteria) - _FILTERABLE
        if unknown:
            raise ValueError(f"unsupported user filter: {', '.join(sorted(unknown))}")
        with _storage_errors("users.find_by"), self._session_factory() as session:
            rows = session.query(User).filter_by(**criteria).order_by(User.id.asc()).all()
            return [_to_domain(row) for row in rows]
