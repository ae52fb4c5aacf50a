# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from authservice.application.use_cases.users.verify_token import VerifyTokenUseCase

F = TypeVar("F", bound=Callable[..., Any])


def bearer_token() -> str | None:
    auth_header = request.headers.get("Authorization", "")
    if auth_header[:7].lower() == "bearer ":
        return auth_header[7:].strip() or None
    return None


def require_token(verify: VerifyTokenUseCase) -> Callable[[F], F]:
    """Reject the request with 401 unless it carries a valid bearer token.

    The verified claims are exposed as ``g.token_claims`` and the username as
    ``g.username``.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            claims = verify.execute(bearer_token())
            g.token_claims = claims
            g.username = claims["username"]
            return func(*args, **kwargs)

        return cast(F, wrapper)

    return decorator


__all__ = ["bearer_token", "require_token"]
