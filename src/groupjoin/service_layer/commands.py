"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RegisterUser(Command):
    """Command to add a new user to the directory."""

    user_id: int
    name: str


@dataclass(frozen=True)
class RegisterRole(Command):
    """Command to add a new role to the directory."""

    role_id: int
    name: str


@dataclass(frozen=True)
class AssignRole(Command):
    """Command to assign an existing role to an existing user."""

    user_id: int
    role_id: int


@dataclass(frozen=True)
class ClearDirectory(Command):
    """Command to delete every user, role and assignment."""


def default_seed_commands(n_users: int = 2, n_roles: int = 2) -> list[Command]:
    """Commands registering ``User 1..n_users`` and ``Role 1..n_roles``.

    Users come first, then roles; ids start at 1.
    """
    cmds: list[Command] = [
        RegisterUser(user_id=i, name=f"User {i}") for i in range(1, n_users + 1)
    ]
    cmds.extend(
        RegisterRole(role_id=i, name=f"Role {i}") for i in range(1, n_roles + 1)
    )
    return cmds
