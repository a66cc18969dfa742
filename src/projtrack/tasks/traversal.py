"""Depth-first walkers over the task tree.

Walkers only use ``Task.children()``, so they work for any node type.
"""

from __future__ import annotations

from collections.abc import Callable

from projtrack.tasks.model import Task


def walk_children_first(task: Task, visit: Callable[[Task], None]) -> None:
    """Walk every child subtree of *task*, then call ``visit(task)``."""
    for child in task.children():
        walk_children_first(child, visit)
    visit(task)


def walk_pre_order(
    task: Task,
    visit: Callable[[Task, int], None],
    depth: int = 0,
) -> None:
    """Call ``visit(task, depth)``, then walk its children one level deeper."""
    visit(task, depth)
    for child in task.children():
        walk_pre_order(child, visit, depth + 1)
