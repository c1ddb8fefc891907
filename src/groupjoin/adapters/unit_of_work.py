"""Unit of Work implementations for groupjoin.

- `SqlAlchemyUnitOfWork`: one SQLAlchemy Connection (and transaction) per
  context, exposing a `SqlAlchemyDirectory`.
- `InMemoryUnitOfWork`: a private snapshot of an `InMemoryDatabase` per
  context; `commit()` replays its writes on the shared database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from groupjoin.adapters.directory import (
    InMemoryDatabase,
    InMemoryDirectory,
    SqlAlchemyDirectory,
)
from groupjoin.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.directory = SqlAlchemyDirectory(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work.

    Changes made through `directory` stay invisible to other units of work on
    the same database until `commit()`.
    """

    def __init__(self, database: InMemoryDatabase | None = None):
        self.database = database if database is not None else InMemoryDatabase()
        self.directory: InMemoryDirectory

    def __enter__(self):
        self.directory = InMemoryDirectory(self.database.snapshot())
        return super().__enter__()

    def commit(self):
        self.database.apply(self.directory.pending)
        self.directory = InMemoryDirectory(self.database.snapshot())

    def rollback(self):
        self.directory = InMemoryDirectory(self.database.snapshot())
