# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime
    profile: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def as_record(self) -> dict[str, Any]:
        """Stored record as registration returns it: extra fields, then identity and digest."""
        record: dict[str, Any] = dict(self.profile)
        record.update(
            id=self.id,
            username=self.username,
            password=self.password_hash,
        )
        return record


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    username: str
    issued_at: datetime
    expires_at: datetime
