"""Implementation of Directory using SQLAlchemy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Table, delete, select

from groupjoin.adapters.db.dialects import DialectName
from groupjoin.adapters.db.schema import roles, user_roles, users
from groupjoin.domain.models import Role, User, UserRole
from groupjoin.interfaces.directory import (
    Directory,
    RoleAlreadyExists,
    UserAlreadyExists,
    UserRoleAlreadyExists,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


class SqlAlchemyDirectory(Directory):
    """Directory implementation that supports both Postgres and SQLite."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.of_connection(connection)

    # --- lookups ---

    def get_user(self, user_id: int) -> User | None:
        stmt = select(users.c.id, users.c.name).where(users.c.id == user_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return User(id=row.id, name=row.name)

    def get_role(self, role_id: int) -> Role | None:
        stmt = select(roles.c.id, roles.c.name).where(roles.c.id == role_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return Role(id=row.id, name=row.name)

    def get_user_role(self, user_id: int, role_id: int) -> UserRole | None:
        stmt = select(user_roles.c.user_id, user_roles.c.role_id).where(
            user_roles.c.user_id == user_id,
            user_roles.c.role_id == role_id,
        )
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return UserRole(user_id=row.user_id, role_id=row.role_id)

    # --- listings ---

    def list_users(self) -> list[User]:
        stmt = select(users.c.id, users.c.name).order_by(users.c.id)
        return [User(id=row.id, name=row.name) for row in self.connection.execute(stmt)]

    def list_roles(self) -> list[Role]:
        stmt = select(roles.c.id, roles.c.name).order_by(roles.c.id)
        return [Role(id=row.id, name=row.name) for row in self.connection.execute(stmt)]

    def list_user_roles(self, user_id: int | None = None) -> list[UserRole]:
        stmt = select(user_roles.c.user_id, user_roles.c.role_id).order_by(
            user_roles.c.user_id, user_roles.c.role_id
        )
        if user_id is not None:
            stmt = stmt.where(user_roles.c.user_id == user_id)
        return [
            UserRole(user_id=row.user_id, role_id=row.role_id)
            for row in self.connection.execute(stmt)
        ]

    # --- writes: no-throw insert, rowcount decides the conflict ---

    def add_user(self, user: User) -> None:
        if not self._insert_ignoring_conflict(users, id=user.id, name=user.name):
            raise UserAlreadyExists(user.id)

    def add_role(self, role: Role) -> None:
        if not self._insert_ignoring_conflict(roles, id=role.id, name=role.name):
            raise RoleAlreadyExists(role.id)

    def add_user_role(self, user_role: UserRole) -> None:
        if not self._insert_ignoring_conflict(
            user_roles, user_id=user_role.user_id, role_id=user_role.role_id
        ):
            raise UserRoleAlreadyExists(user_role.user_id, user_role.role_id)

    def clear(self) -> None:
        # children first so foreign keys never dangle
        self.connection.execute(delete(user_roles))
        self.connection.execute(delete(roles))
        self.connection.execute(delete(users))

    def _insert_ignoring_conflict(self, table: Table, **values: Any) -> bool:
        """Insert one row unless its primary key exists; return True if inserted."""
        stmt = self.dialect.insert_ignoring_conflict(table).values(**values)
        return self.connection.execute(stmt).rowcount == 1
