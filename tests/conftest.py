"""Shared fixtures for projtrack tests.

File handling in tests:
- Use tmp_path for any project file so tests are isolated and cleaned up.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from projtrack import log
from projtrack.project import Project
from projtrack.tasks.model import CompositeTask, SimpleTask, Task, User


def _make_simple(
    description: str = "Task",
    deadline: datetime | None = None,
    owner: User | None = None,
) -> SimpleTask:
    return SimpleTask(description, deadline or datetime(2024, 1, 15), owner=owner)


def _make_composite(
    description: str = "Composite",
    subtasks: list[Task] | None = None,
    deadline: datetime | None = None,
    owners: list[User] | None = None,
) -> CompositeTask:
    return CompositeTask(
        description,
        deadline or datetime(2024, 1, 25),
        subtasks=subtasks or [],
        owners=owners or [],
    )


@pytest.fixture(autouse=True)
def _quiet_debug():
    """Keep debug output off between tests."""
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture
def make_simple():
    """Factory fixture that creates SimpleTask instances."""
    return _make_simple


@pytest.fixture
def make_composite():
    """Factory fixture that creates CompositeTask instances."""
    return _make_composite


@pytest.fixture
def alice() -> User:
    return User("Alice")


@pytest.fixture
def bob() -> User:
    return User("Bob")


@pytest.fixture
def project(alice: User, bob: User) -> Project:
    """A project whose members are Alice and Bob, with no tasks yet."""
    return Project("Software implementation", datetime(2024, 2, 1), [alice, bob])
