"""Fixtures for service-layer unit tests: an in-memory unit of work and bus."""

import pytest

from groupjoin.adapters.unit_of_work import InMemoryUnitOfWork
from groupjoin.bootstrap import build_message_bus
from groupjoin.service_layer.handlers import COMMAND_HANDLERS

# pylint: disable=redefined-outer-name


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    """A unit of work over a fresh, private in-memory database."""
    return InMemoryUnitOfWork()


@pytest.fixture
def bus(uow):
    """Message bus wired with the real handlers and ``uow``."""
    return build_message_bus(uow, COMMAND_HANDLERS)
