"""Unit tests for the in-memory database and its registry."""

from __future__ import annotations

import uuid

import pytest

from groupjoin.adapters.directory import Change, InMemoryDatabase, InMemoryDirectory
from groupjoin.domain.models import Role, User, UserRole
from groupjoin.interfaces.directory import UserAlreadyExists, UserRoleAlreadyExists

# pylint: disable=redefined-outer-name


@pytest.fixture
def db_name():
    """A unique registry name, dropped after the test."""
    name = f"test-{uuid.uuid4()}"
    yield name
    InMemoryDatabase.drop(name)


def test_named_returns_same_instance(db_name):
    """Two lookups of one name share state."""
    assert InMemoryDatabase.named(db_name) is InMemoryDatabase.named(db_name)


def test_different_names_are_isolated(db_name):
    """Distinct names are distinct databases."""
    other = f"{db_name}-other"
    try:
        assert InMemoryDatabase.named(db_name) is not InMemoryDatabase.named(other)
    finally:
        InMemoryDatabase.drop(other)


def test_drop_forgets_database(db_name):
    """After drop(), the name maps to a fresh database."""
    first = InMemoryDatabase.named(db_name)
    InMemoryDatabase.drop(db_name)
    assert InMemoryDatabase.named(db_name) is not first


def test_drop_unknown_name_is_noop():
    """Dropping an unknown name does not raise."""
    InMemoryDatabase.drop("never-registered")


def test_add_role_drops_attached_links():
    """Stored roles never carry link rows."""
    directory = InMemoryDirectory()
    directory.add_role(Role(1, "Role 1", user_roles=(UserRole(1, 1),)))
    assert directory.get_role(1) == Role(1, "Role 1")


def test_snapshot_is_isolated_from_committed_state():
    """Changes to a snapshot are invisible until applied."""
    database = InMemoryDatabase()
    tables = database.snapshot()
    tables.users[1] = User(1, "User 1")

    assert not database.snapshot().users

    database.apply([Change("add_user", (User(1, "User 1"),))])
    assert database.snapshot().users == {1: User(1, "User 1")}


def test_directory_records_writes_in_order():
    """Every successful write is recorded; rejected writes are not."""
    directory = InMemoryDirectory()
    directory.add_user(User(1, "User 1"))
    directory.add_role(Role(1, "Role 1", user_roles=(UserRole(1, 1),)))
    directory.add_user_role(UserRole(1, 1))
    with pytest.raises(UserAlreadyExists):
        directory.add_user(User(1, "again"))
    directory.clear()

    assert directory.pending == [
        Change("add_user", (User(1, "User 1"),)),
        Change("add_role", (Role(1, "Role 1"),)),
        Change("add_user_role", (UserRole(1, 1),)),
        Change("clear"),
    ]


def test_apply_merges_with_rows_committed_since_the_snapshot():
    """Changes replay on the current tables, not the caller's snapshot."""
    database = InMemoryDatabase()
    database.apply([Change("add_user", (User(1, "User 1"),))])

    database.apply([Change("add_user", (User(2, "User 2"),))])

    assert sorted(database.snapshot().users) == [1, 2]


def test_apply_is_all_or_nothing():
    """A conflicting change aborts the whole batch."""
    database = InMemoryDatabase()
    database.apply([Change("add_user_role", (UserRole(1, 1),))])

    with pytest.raises(UserRoleAlreadyExists):
        database.apply(
            [
                Change("add_user", (User(5, "User 5"),)),
                Change("add_user_role", (UserRole(1, 1),)),
            ]
        )

    committed = database.snapshot()
    assert not committed.users
    assert list(committed.user_roles) == [(1, 1)]
