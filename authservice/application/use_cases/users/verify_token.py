"""Use-case for checking bearer tokens on restricted routes."""

from __future__ import annotations

from typing import Any

from authservice.domain.users.exceptions import TokenRequiredError
from authservice.domain.users.repositories import TokenIssuer


class VerifyTokenUseCase:
    def __init__(self, *, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> dict[str, Any]:
        if not token:
            raise TokenRequiredError()
        return self._tokens.decode(token)
