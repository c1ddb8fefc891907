"""Entities of the users/roles model.

Users and roles are independent; a `UserRole` link row assigns one role to one
user and is identified by the composite key ``(user_id, role_id)``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """A user.

    Attributes:
        id: Unique user identifier.
        name: Display name.
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class UserRole:
    """Link row assigning role ``role_id`` to user ``user_id``."""

    user_id: int
    role_id: int

    @property
    def key(self) -> tuple[int, int]:
        """Composite key ``(user_id, role_id)``."""
        return (self.user_id, self.role_id)


@dataclass(frozen=True, slots=True)
class Role:
    """A role.

    Attributes:
        id: Unique role identifier.
        name: Display name.
        user_roles: Link rows attached by the group-join evaluator. Always
            empty for roles loaded from storage; never ``None``.
    """

    id: int
    name: str
    user_roles: tuple[UserRole, ...] = ()
