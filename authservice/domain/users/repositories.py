# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from .entities import IssuedToken, User


class UserRepository(Protocol):
    def add(self, user: User) -> User: ...
    def find_by(self, **criteria: Any) -> Sequence[User]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user: User) -> IssuedToken: ...
    def decode(self, token: str) -> dict[str, Any]: ...
