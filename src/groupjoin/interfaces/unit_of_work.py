"""Unit of Work interface for groupjoin.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
with a Directory and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc

from groupjoin.interfaces.directory import Directory


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    directory: Directory

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
