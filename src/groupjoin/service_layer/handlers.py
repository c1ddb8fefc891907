"""Service layer handlers."""

import logging
from collections.abc import Callable

from groupjoin.domain.models import Role, User, UserRole
from groupjoin.interfaces.directory import RoleNotFoundError, UserNotFoundError
from groupjoin.interfaces.unit_of_work import AbstractUnitOfWork

from . import commands

logger = logging.getLogger(__name__)


def register_user(cmd: commands.RegisterUser, uow: AbstractUnitOfWork) -> None:
    """Add a user.

    Raises:
        UserAlreadyExists: If the id is taken.
    """
    with uow:
        uow.directory.add_user(User(id=cmd.user_id, name=cmd.name))
        uow.commit()
    logger.debug("Registered user %s (%r)", cmd.user_id, cmd.name)


def register_role(cmd: commands.RegisterRole, uow: AbstractUnitOfWork) -> None:
    """Add a role.

    Raises:
        RoleAlreadyExists: If the id is taken.
    """
    with uow:
        uow.directory.add_role(Role(id=cmd.role_id, name=cmd.name))
        uow.commit()
    logger.debug("Registered role %s (%r)", cmd.role_id, cmd.name)


def assign_role(cmd: commands.AssignRole, uow: AbstractUnitOfWork) -> None:
    """Assign a role to a user.

    Both sides must exist; this is checked here so every backend rejects a
    dangling assignment the same way, whether or not it enforces foreign keys.

    Raises:
        UserNotFoundError: If the user does not exist.
        RoleNotFoundError: If the role does not exist.
        UserRoleAlreadyExists: If the user already holds the role.
    """
    with uow:
        if uow.directory.get_user(cmd.user_id) is None:
            raise UserNotFoundError(cmd.user_id)
        if uow.directory.get_role(cmd.role_id) is None:
            raise RoleNotFoundError(cmd.role_id)
        uow.directory.add_user_role(UserRole(user_id=cmd.user_id, role_id=cmd.role_id))
        uow.commit()
    logger.debug("Assigned role %s to user %s", cmd.role_id, cmd.user_id)


def clear_directory(
    cmd: commands.ClearDirectory,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> None:
    """Delete every assignment, role and user."""
    with uow:
        uow.directory.clear()
        uow.commit()
    logger.debug("Cleared directory")


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., None]] = {
    commands.RegisterUser: register_user,
    commands.RegisterRole: register_role,
    commands.AssignRole: assign_role,
    commands.ClearDirectory: clear_directory,
}
