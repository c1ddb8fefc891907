"""Interface for storing users, roles and their link rows.

Defines the `Directory` abstraction: the data source the group-join view reads
from and the store the seeding/assignment handlers write to. Every backend
returns rows in primary-key order so that results compare equal across
backends.
"""

from __future__ import annotations

import abc

from groupjoin.domain.models import Role, User, UserRole


class Directory(abc.ABC):
    """Users, roles and user/role link rows."""

    # --- lookups ---

    @abc.abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Return the user with ``user_id``, or ``None`` if absent."""

    @abc.abstractmethod
    def get_role(self, role_id: int) -> Role | None:
        """Return the role with ``role_id``, or ``None`` if absent.

        Returned roles never carry link rows (``user_roles == ()``).
        """

    @abc.abstractmethod
    def get_user_role(self, user_id: int, role_id: int) -> UserRole | None:
        """Find a link row by its composite key.

        Args:
            user_id: User half of the key.
            role_id: Role half of the key.

        Returns:
            UserRole | None: The link row if the user holds the role, otherwise
            ``None``.
        """

    # --- listings ---

    @abc.abstractmethod
    def list_users(self) -> list[User]:
        """Return all users ordered by id."""

    @abc.abstractmethod
    def list_roles(self) -> list[Role]:
        """Return all roles ordered by id."""

    @abc.abstractmethod
    def list_user_roles(self, user_id: int | None = None) -> list[UserRole]:
        """Return link rows ordered by ``(user_id, role_id)``.

        Args:
            user_id: When given, only the link rows of this user are returned.
                An unknown user yields an empty list.

        Returns:
            list[UserRole]: The matching link rows.
        """

    # --- writes ---

    @abc.abstractmethod
    def add_user(self, user: User) -> None:
        """Store a new user.

        Raises:
            UserAlreadyExists: If a user with the same id is stored.
        """

    @abc.abstractmethod
    def add_role(self, role: Role) -> None:
        """Store a new role. Any ``user_roles`` on the argument are ignored.

        Raises:
            RoleAlreadyExists: If a role with the same id is stored.
        """

    @abc.abstractmethod
    def add_user_role(self, user_role: UserRole) -> None:
        """Store a new link row.

        Referential existence of the user and role is checked by the service
        layer, not here.

        Raises:
            UserRoleAlreadyExists: If the user already holds the role.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Delete every link row, role and user."""
