# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any

from authservice.domain.users.entities import User
from authservice.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        username: str,
        password: str,
        profile: Mapping[str, Any] | None = None,
    ) -> User:
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            password_hash=hashed,
            created_at=datetime.now(UTC),
            profile=MappingProxyType(dict(profile or {})),
        )
        return self._users.add(user)
