"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from groupjoin import config
from groupjoin.adapters.db.engine import ensure_schema, make_engine
from groupjoin.adapters.directory import InMemoryDatabase
from groupjoin.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from groupjoin.interfaces.unit_of_work import AbstractUnitOfWork
from groupjoin.service_layer.handlers import COMMAND_HANDLERS
from groupjoin.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from groupjoin.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    message_bus: MessageBus

    @property
    def uow(self) -> AbstractUnitOfWork:
        """The unit of work shared by handlers and views."""
        return self.message_bus.uow


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a unit of work for the backend selected by ``url``.

    ``memory://<name>`` selects the named in-memory database (``memory://``
    alone a private one). Anything else is treated as a SQLAlchemy URL; the
    schema is created on first use.
    """
    if config.is_memory_url(url):
        name = config.memory_database_name(url)
        logger.debug("Using in-memory database %s", name or "<private>")
        database = InMemoryDatabase.named(name) if name else InMemoryDatabase()
        return InMemoryUnitOfWork(database)

    engine = make_engine(url)
    ensure_schema(engine)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork, command_handlers: dict[type[Command], Callable[..., None]]
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(url: str | None = None) -> AppContainer:
    """Wire the application for ``url`` (default: ``GROUPJOIN_DB_URL``).

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    uow = build_uow(url if url is not None else config.get_db_url())
    message_bus = build_message_bus(uow, COMMAND_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
