"""Backends the SQL directory can write to.

Each one needs its own ``INSERT ... ON CONFLICT DO NOTHING`` construct, so the
directory resolves its dialect once, when it is handed a connection.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.dml import Insert


class UnsupportedDialect(Exception):
    """Raised for a database without a known conflict-ignoring insert."""


class DialectName(str, Enum):
    """SQLAlchemy dialect names of the supported backends."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def of_connection(cls, connection: Connection) -> DialectName:
        """Return the dialect ``connection`` talks to.

        Raises:
            UnsupportedDialect: For anything but PostgreSQL or SQLite.
        """
        name = connection.dialect.name
        try:
            return cls(name)
        except ValueError as e:
            raise UnsupportedDialect(f"Unsupported dialect: {name!r}") from e

    def insert_ignoring_conflict(self, table: Table) -> Insert:
        """An INSERT into ``table`` that skips rows whose key already exists."""
        insert = pg_insert if self is DialectName.POSTGRES else sqlite_insert
        return insert(table).on_conflict_do_nothing()
