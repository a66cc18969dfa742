"""Progress report rendering."""

from __future__ import annotations

from collections.abc import Iterable

from projtrack.config import DEFAULT_INDENT_WIDTH
from projtrack.tasks.model import Task
from projtrack.tasks.traversal import walk_pre_order


def report_header(objectives: str) -> str:
    return f'Progress Report for Project "{objectives}":\n'


def format_task_line(task: Task, depth: int, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    indent = " " * (depth * indent_width)
    return (
        f"{indent}- Description: {task.get_description()}, "
        f"Status: {task.get_status()}, "
        f"Progress: {task.track_progress()}%\n"
    )


def render_report(
    objectives: str,
    tasks: Iterable[Task],
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Render the indented, pre-order progress tree for *tasks*."""
    lines: list[str] = [report_header(objectives)]

    def _visit(task: Task, depth: int) -> None:
        lines.append(format_task_line(task, depth, indent_width))

    for task in tasks:
        walk_pre_order(task, _visit)
    return "".join(lines)
