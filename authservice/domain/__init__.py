# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import IssuedToken, User

__all__ = ["IssuedToken", "User"]
