"""Directory adapters.

- `InMemoryDirectory`: ephemeral storage over an `InMemoryDatabase`; suitable
  for tests and prototyping.
- `SqlAlchemyDirectory`: durable storage on SQLite or PostgreSQL through a
  SQLAlchemy connection.
"""

from .memory import Change, InMemoryDatabase, InMemoryDirectory, Tables
from .sqlalchemy_directory import SqlAlchemyDirectory

__all__ = [
    "Change",
    "InMemoryDatabase",
    "InMemoryDirectory",
    "SqlAlchemyDirectory",
    "Tables",
]
