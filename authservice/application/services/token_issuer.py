# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT, HS256) with a fixed one hour lifetime."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from authservice.domain.users.entities import IssuedToken, User
from authservice.domain.users.exceptions import InvalidTokenError
from authservice.domain.users.repositories import TokenIssuer

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=1)
SUBJECT = "user"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        secret: str,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._clock = clock

    def issue(self, user: User) -> IssuedToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + TOKEN_TTL
        claims: dict[str, Any] = {
            "subject": SUBJECT,
            "username": user.username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret, algorithm=ALGORITHM)
        return IssuedToken(
            token=token,
            username=user.username,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry; raises ``InvalidTokenError`` otherwise."""
        try:
            claims = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as exc:
            raise InvalidTokenError(context={"reason": str(exc)}) from exc
        if claims.get("subject") != SUBJECT or not claims.get("username"):
            raise InvalidTokenError(context={"reason": "unexpected claims"})
        return claims


__all__ = ["ALGORITHM", "JwtTokenIssuer", "SUBJECT", "TOKEN_TTL"]
