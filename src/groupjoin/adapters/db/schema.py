"""Users/roles schema.

| Table        | Key                         | Notes                               |
|--------------|-----------------------------|-------------------------------------|
| `users`      | `id`                        |                                     |
| `roles`      | `id`                        |                                     |
| `user_roles` | `(user_id, role_id)`        | FKs to `users.id` and `roles.id`    |

Ids are supplied by the caller; none of the tables autoincrement.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer, String, Table

from .metadata import metadata

__all__ = ["users", "roles", "user_roles"]

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(200), nullable=False),
    comment="Users.",
)

roles = Table(
    "roles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(200), nullable=False),
    comment="Roles.",
)

user_roles = Table(
    "user_roles",
    metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    ),
    # the composite PK already serves lookups by user_id
    Index(None, "role_id"),
    comment="Role assignments. One row per (user, role) pair.",
)
