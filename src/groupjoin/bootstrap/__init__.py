"""Bootstrap (composition root) for groupjoin.

Assembles the application at runtime: picks the storage backend from the
database URL, wires the unit of work into the service-layer handlers, and
returns the pieces entrypoints need.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- Inner layers must not import `groupjoin.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus, build_uow

__all__ = ["AppContainer", "bootstrap", "build_message_bus", "build_uow"]
