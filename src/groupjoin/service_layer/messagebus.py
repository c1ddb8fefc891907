"""Dispatch of directory commands to their handlers."""

import logging
from collections.abc import Callable, Iterable
from functools import partial

from groupjoin.interfaces.directory import DirectoryError
from groupjoin.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised when no handler is registered for a command's type."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Route each command to the handler registered for its exact type.

    A command the directory refuses (duplicate key, unknown user or role) is
    logged as a warning; anything else a handler raises is logged with its
    traceback. Either way the error propagates to the caller.

    Args:
        uow: The unit of work the handlers were built with, exposed as `uow`
            so views can read from the same storage.
        command_handlers: Command type to a callable taking only the command
            (see `groupjoin.bootstrap` for how dependencies are bound).
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Run the handler for ``cmd``.

        Raises:
            NoHandlerForCommand: If nothing is registered for the command type.
        """
        if (handler := self._command_handlers.get(type(cmd))) is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = handler_name(handler)
        logger.debug("Handling %s with %s", cmd, name)
        try:
            handler(cmd)
        except DirectoryError as e:
            logger.warning("%s rejected: %s", cmd, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception("%s failed in %s", cmd, name)
            raise

    def handle_all(self, cmds: Iterable[Command]) -> None:
        """Handle commands in order, stopping at the first failure.

        Commands handled before the failure stay committed.
        """
        for cmd in cmds:
            self.handle(cmd)


def handler_name(handler: Callable[..., None]) -> str:
    """Name to log for ``handler``, looking through `functools.partial`."""
    while isinstance(handler, partial):
        handler = handler.func
    return getattr(handler, "__name__", repr(handler))
