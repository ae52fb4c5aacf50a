# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from authservice.infrastructure.db import ENGINE

REQUIRED_TABLES = ("users",)


class SchemaMissingError(RuntimeError):
    pass


def check_database(engine: Engine = ENGINE) -> bool:
    """Connectivity plus presence of the tables registration and login read."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
        missing = [name for name in REQUIRED_TABLES if not inspect(connection).has_table(name)]
    if missing:
        raise SchemaMissingError(f"missing tables: {', '.join(missing)}")
    return True


__all__ = ["REQUIRED_TABLES", "SchemaMissingError", "check_database"]
