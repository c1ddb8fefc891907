"""In-memory Directory implementation.

`InMemoryDatabase` owns the committed tables. A database can be *named*: every
call to `InMemoryDatabase.named("x")` in the process returns the same instance,
so separate units of work (e.g. a writer and a later reader) share state the
way two connections to one database would. Unnamed databases are private to
whoever holds them.

`InMemoryDirectory` works on a `Tables` snapshot and records each write as a
`Change`. On commit the unit of work hands those changes to
`InMemoryDatabase.apply`, which replays them on the committed tables.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from groupjoin.domain.models import Role, User, UserRole
from groupjoin.interfaces.directory import (
    Directory,
    RoleAlreadyExists,
    UserAlreadyExists,
    UserRoleAlreadyExists,
)


@dataclass
class Tables:
    """The three tables, keyed by primary key."""

    users: dict[int, User] = field(default_factory=dict)
    roles: dict[int, Role] = field(default_factory=dict)
    user_roles: dict[tuple[int, int], UserRole] = field(default_factory=dict)

    def copy(self) -> Tables:
        """Return a copy whose dicts can be modified independently.

        Rows are frozen, so copying the dicts is enough.
        """
        return Tables(
            users=dict(self.users),
            roles=dict(self.roles),
            user_roles=dict(self.user_roles),
        )


class InMemoryDatabase:
    """Committed in-memory state, optionally registered under a name."""

    _registry: ClassVar[dict[str, InMemoryDatabase]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, name: str | None = None):
        self.name = name
        self._tables = Tables()
        self._lock = threading.Lock()

    @classmethod
    def named(cls, name: str) -> InMemoryDatabase:
        """Return the process-wide database registered as ``name``, creating it if needed."""
        with cls._registry_lock:
            if (database := cls._registry.get(name)) is None:
                database = cls._registry[name] = cls(name)
            return database

    @classmethod
    def drop(cls, name: str) -> None:
        """Forget the database registered as ``name`` (no-op if unknown)."""
        with cls._registry_lock:
            cls._registry.pop(name, None)

    def snapshot(self) -> Tables:
        """Return a private copy of the committed tables."""
        with self._lock:
            return self._tables.copy()

    def apply(self, changes: Iterable[Change]) -> None:
        """Replay ``changes`` against the committed tables as one transaction.

        Changes are re-checked against the tables as they are now, not as they
        were when the caller took its snapshot, so concurrent writers keep each
        other's rows and a conflicting insert raises here. If any change fails,
        nothing is committed.

        Raises:
            DirectoryError: The first conflict met while replaying.
        """
        with self._lock:
            target = InMemoryDirectory(self._tables.copy())
            for change in changes:
                change.replay(target)
            self._tables = target.tables


@dataclass(frozen=True)
class Change:
    """One write made through an `InMemoryDirectory`, replayable elsewhere."""

    operation: str
    args: tuple = ()

    def replay(self, directory: InMemoryDirectory) -> None:
        getattr(directory, self.operation)(*self.args)


class InMemoryDirectory(Directory):
    """Directory over a `Tables` snapshot.

    Note: a single instance is not thread-safe; concurrent callers should use
    separate units of work, each with its own snapshot.
    """

    def __init__(self, tables: Tables | None = None):
        self.tables = tables if tables is not None else Tables()
        # writes since construction, in order
        self.pending: list[Change] = []

    # --- lookups ---

    def get_user(self, user_id: int) -> User | None:
        return self.tables.users.get(user_id)

    def get_role(self, role_id: int) -> Role | None:
        return self.tables.roles.get(role_id)

    def get_user_role(self, user_id: int, role_id: int) -> UserRole | None:
        return self.tables.user_roles.get((user_id, role_id))

    # --- listings ---

    def list_users(self) -> list[User]:
        return [self.tables.users[k] for k in sorted(self.tables.users)]

    def list_roles(self) -> list[Role]:
        return [self.tables.roles[k] for k in sorted(self.tables.roles)]

    def list_user_roles(self, user_id: int | None = None) -> list[UserRole]:
        return [
            self.tables.user_roles[k]
            for k in sorted(self.tables.user_roles)
            if user_id is None or k[0] == user_id
        ]

    # --- writes ---

    def add_user(self, user: User) -> None:
        if user.id in self.tables.users:
            raise UserAlreadyExists(user.id)
        self.tables.users[user.id] = user
        self.pending.append(Change("add_user", (user,)))

    def add_role(self, role: Role) -> None:
        if role.id in self.tables.roles:
            raise RoleAlreadyExists(role.id)
        stored = Role(id=role.id, name=role.name)
        self.tables.roles[role.id] = stored
        self.pending.append(Change("add_role", (stored,)))

    def add_user_role(self, user_role: UserRole) -> None:
        if user_role.key in self.tables.user_roles:
            raise UserRoleAlreadyExists(user_role.user_id, user_role.role_id)
        self.tables.user_roles[user_role.key] = user_role
        self.pending.append(Change("add_user_role", (user_role,)))

    def clear(self) -> None:
        self.tables.user_roles.clear()
        self.tables.roles.clear()
        self.tables.users.clear()
        self.pending.append(Change("clear"))
