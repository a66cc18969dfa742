"""Task tree and user data models.

Tasks and users compare by identity: two tasks with the same description are
still different tasks, so list membership and removal match by reference.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from projtrack.errors import TaskAlreadyCompleted

if TYPE_CHECKING:
    from projtrack.project import Project


class TaskStatus(str, Enum):
    IN_PROGRESS = "In progress"
    COMPLETED = "Completed"


@dataclass(eq=False)
class Task(ABC):
    """A node in the task tree.  Subclasses implement ``track_progress``."""

    description: str
    deadline: datetime
    status: TaskStatus = TaskStatus.IN_PROGRESS
    completion_date: datetime | None = None

    is_composite = False

    def __post_init__(self) -> None:
        if (self.completion_date is None) != (self.status != TaskStatus.COMPLETED):
            raise ValueError(
                f'Task "{self.description}": completion_date must be set exactly when '
                f"status is {TaskStatus.COMPLETED.value!r}"
            )

    @abstractmethod
    def track_progress(self) -> int:
        """Return completion progress as a percentage in ``0..100``."""
        ...

    def children(self) -> tuple[Task, ...]:
        return ()

    @property
    def completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def complete(self, completion_date: datetime) -> None:
        if self.completed:
            raise TaskAlreadyCompleted(
                f'Task "{self.description}" was already completed on '
                f"{self.completion_date.isoformat() if self.completion_date else '?'}"
            )
        self.status = TaskStatus.COMPLETED
        self.completion_date = completion_date

    def check_deadline_violation(self) -> bool:
        """Return ``True`` if the task was completed strictly after its deadline."""
        return self.completion_date is not None and self.completion_date > self.deadline

    def get_description(self) -> str:
        return self.description

    def get_status(self) -> str:
        return self.status.value


@dataclass(eq=False, kw_only=True)
class SimpleTask(Task):
    owner: User | None = None

    def track_progress(self) -> int:
        return 100 if self.completed else 0


@dataclass(eq=False, kw_only=True)
class CompositeTask(Task):
    """A task made of subtasks.

    Completing a composite does not touch its subtasks.  While in progress it
    reports the floored mean of its subtasks' progress, capped at 99 so that
    100 always means the composite itself is completed.
    """

    subtasks: list[Task] = field(default_factory=list)
    owners: list[User] = field(default_factory=list)

    is_composite = True

    def children(self) -> tuple[Task, ...]:
        return tuple(self.subtasks)

    def track_progress(self) -> int:
        if self.completed:
            return 100
        if not self.subtasks:
            return 0
        total = sum(t.track_progress() for t in self.subtasks)
        return min(total // len(self.subtasks), 99)

    def check_deadline_violation(self) -> bool:
        if super().check_deadline_violation():
            return True
        return any(t.check_deadline_violation() for t in self.subtasks)


@dataclass(eq=False)
class User:
    name: str
    assigned_tasks: list[Task] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
