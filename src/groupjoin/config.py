"""Configuration utilities for groupjoin.

This module centralizes small helpers and constants related to application configuration.
"""

import os

DB_URL_ENV_VAR = "GROUPJOIN_DB_URL"  # pragma: no mutate

#: URL scheme selecting the in-memory backend, e.g. ``memory://demo``.
MEMORY_SCHEME = "memory"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the GROUPJOIN_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `GROUPJOIN_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `GROUPJOIN_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def is_memory_url(url: str) -> bool:
    """Return True if *url* selects the in-memory backend (``memory://[name]``)."""
    return url.strip().lower().startswith(f"{MEMORY_SCHEME}://")


def memory_database_name(url: str) -> str | None:
    """Extract the database name from a ``memory://`` URL.

    Returns:
        The name after the scheme, or ``None`` for a bare ``memory://``
        (a private, unnamed database).
    """
    name = url.strip()[len(MEMORY_SCHEME) + 3 :].strip("/")
    return name or None


def backend_label(url: str | None) -> str:
    """Short, credential-free name of the backend *url* selects, for log lines.

    ``memory://demo`` gives ``memory:demo``; SQLAlchemy URLs give their scheme
    (``sqlite+pysqlite``, ``postgresql+psycopg``).
    """
    if not url:
        return "<unset>"
    if is_memory_url(url):
        return f"{MEMORY_SCHEME}:{memory_database_name(url) or '<private>'}"
    scheme, sep, _ = url.strip().partition("://")
    return scheme if sep and scheme else "<invalid>"
