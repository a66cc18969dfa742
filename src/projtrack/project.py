"""Project aggregate: owns top-level tasks and mediates assignment, completion,
removal and reporting.

Usage::

    project = Project("Ship v2", deadline, [alice, bob])
    project.add_task(task)
    project.assign_task(task, alice)            # children first, then the task
    project.complete_task(task, completed_on)   # warns when late
    project.remove_task(task)
    print(project.generate_progress_report())

Lookups only match the top-level ``tasks`` list, by identity.  A subtask is
never found on its own unless it was also added at the top level.
"""

from __future__ import annotations

from datetime import datetime

from projtrack import log
from projtrack.config import DEFAULT_INDENT_WIDTH
from projtrack.errors import ErrorKind, NodeOutcome, OperationResult
from projtrack.report import render_report
from projtrack.tasks.model import Task, User
from projtrack.tasks.traversal import walk_children_first


class Project:
    def __init__(
        self,
        objectives: str,
        deadline: datetime,
        eligible_users: list[User] | None = None,
    ) -> None:
        self.objectives = objectives
        self.deadline = deadline
        self.eligible_users: list[User] = list(eligible_users or [])
        self.tasks: list[Task] = []

    def __repr__(self) -> str:
        return f"Project(objectives={self.objectives!r}, tasks={len(self.tasks)})"

    # ── membership ───────────────────────────────────────────────

    def has_task(self, task: Task) -> bool:
        return task in self.tasks

    def is_eligible(self, user: User) -> bool:
        return user in self.eligible_users

    def _task_not_found(self, task: Task) -> OperationResult:
        msg = f'Task "{task.get_description()}" does not belong to the project.'
        log.error(msg)
        return OperationResult(error=ErrorKind.TASK_NOT_FOUND, message=msg)

    # ── operations ───────────────────────────────────────────────

    def add_task(self, task: Task) -> OperationResult:
        """Append *task* to the top-level list.  Duplicates are allowed."""
        self.tasks.append(task)
        log.debug(f'Task "{task.get_description()}" added ({len(self.tasks)} top-level)')
        return OperationResult()

    def assign_task(self, task: Task, user: User) -> OperationResult:
        """Assign *task* and its whole subtree to *user*.

        Children are offered before their parent.  Each node is appended to
        ``user.assigned_tasks`` only if it is itself a top-level task of this
        project; other nodes are reported as not found.
        """
        if not self.is_eligible(user):
            msg = f'User "{user.name}" is not a member of the project.'
            log.error(msg)
            return OperationResult(error=ErrorKind.NOT_ELIGIBLE_USER, message=msg)

        result = OperationResult()

        def _assign(node: Task) -> None:
            if self.has_task(node):
                user.assigned_tasks.append(node)
                log.success(f'Task "{node.get_description()}" assigned to user "{user.name}".')
                result.nodes.append(NodeOutcome(node))
            else:
                log.warn(f'Task "{node.get_description()}" does not belong to the project.')
                result.nodes.append(NodeOutcome(node, ErrorKind.ASSIGNMENT_NOT_FOUND))

        walk_children_first(task, _assign)
        result.users.append(user.name)
        return result

    def complete_task(self, task: Task, completion_date: datetime) -> OperationResult:
        """Mark a top-level *task* completed and warn if it ran past its deadline."""
        if not self.has_task(task):
            return self._task_not_found(task)

        if task.completed:
            msg = f'Task "{task.get_description()}" is already completed.'
            log.warn(msg)
            return OperationResult(error=ErrorKind.ALREADY_COMPLETED, message=msg)

        task.complete(completion_date)
        log.success(
            f'Task "{task.get_description()}" completed on {completion_date.isoformat()}.'
        )

        result = OperationResult(late=task.check_deadline_violation())
        if result.late:
            result.message = (
                f'Task "{task.get_description()}" was completed after its deadline.'
            )
            log.warn(result.message)
        return result

    def remove_task(self, task: Task) -> OperationResult:
        """Remove *task* from the project and from the first user holding it."""
        if not self.has_task(task):
            return self._task_not_found(task)

        self.tasks.remove(task)
        log.success(f'Task "{task.get_description()}" removed from the project.')

        result = OperationResult()
        for user in self.eligible_users:
            if task in user.assigned_tasks:
                user.assigned_tasks.remove(task)
                log.success(f'Task removed from user "{user.name}".')
                result.users.append(user.name)
                break
        return result

    def generate_progress_report(self, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
        return render_report(self.objectives, self.tasks, indent_width)
