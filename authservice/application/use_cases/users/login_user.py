# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from authservice.domain.users.entities import IssuedToken, User
from authservice.domain.users.exceptions import InvalidCredentialsError
from authservice.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


@dataclass(slots=True, frozen=True)
class LoginResult:
    user: User
    token: IssuedToken


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, username: str, password: str) -> LoginResult:
        user = next(iter(self._users.find_by(username=username)), None)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        if not password_valid:
            raise InvalidCredentialsError()

        return LoginResult(user=user, token=self._tokens.issue(user))
