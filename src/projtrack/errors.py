"""Typed outcomes for project operations.

Domain failures (ineligible user, unknown task) never raise: operations return
an :class:`OperationResult` and log a diagnostic.  Exceptions are reserved for
misuse of the API or malformed input files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from projtrack.tasks.model import Task


class ErrorKind(str, Enum):
    NOT_ELIGIBLE_USER = "not_eligible_user"
    TASK_NOT_FOUND = "task_not_found"
    ASSIGNMENT_NOT_FOUND = "assignment_not_found"
    ALREADY_COMPLETED = "already_completed"


class TaskAlreadyCompleted(ValueError):
    """Raised when completing a task that is already completed."""


class ProjectFileError(ValueError):
    """Raised when a project file cannot be turned into a project."""


@dataclass
class NodeOutcome:
    """Result of offering a single tree node to an operation."""

    task: Task
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class OperationResult:
    """Uniform result from any :class:`~projtrack.project.Project` operation."""

    error: ErrorKind | None = None
    message: str = ""
    nodes: list[NodeOutcome] = field(default_factory=list)
    late: bool = False
    users: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def assigned(self) -> list[Task]:
        return [n.task for n in self.nodes if n.ok]

    @property
    def not_found(self) -> list[Task]:
        return [n.task for n in self.nodes if n.error == ErrorKind.ASSIGNMENT_NOT_FOUND]
