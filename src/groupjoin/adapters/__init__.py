"""Adapters (infrastructure) for groupjoin.

Provide concrete implementations of the application ports: the in-memory and
SQLAlchemy directories, units of work, and the database wiring they need
(engines, metadata, table definitions).

Dependency rule: may import `groupjoin.domain` and `groupjoin.interfaces`; the
domain must not import this package.
"""
