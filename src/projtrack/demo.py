"""Built-in sample project used by ``projtrack demo``."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from projtrack.project import Project
from projtrack.tasks.model import CompositeTask, SimpleTask, User


@dataclass
class DemoProject:
    project: Project
    users: dict[str, User] = field(default_factory=dict)
    tasks: dict[str, SimpleTask | CompositeTask] = field(default_factory=dict)


def build_demo_project() -> DemoProject:
    """Create the sample users, tasks and project without running any operation."""
    alice, bob, charlie = User("Alice"), User("Bob"), User("Charlie")

    review = SimpleTask("Review code", datetime(2024, 1, 15), owner=alice)
    modularize = SimpleTask("Modularize code", datetime(2024, 1, 20), owner=bob)
    new_class = SimpleTask("Create new class", datetime(2024, 1, 20), owner=bob)
    review_docs = SimpleTask("Review documentation", datetime(2024, 1, 18), owner=charlie)
    composite = CompositeTask(
        "Composite Task 1",
        datetime(2024, 1, 25),
        subtasks=[review, modularize],
        owners=[alice, bob],
    )

    project = Project("Software implementation", datetime(2024, 2, 1), [alice, bob, charlie])
    for user in (alice, bob, charlie):
        user.projects.append(project)

    return DemoProject(
        project=project,
        users={u.name: u for u in (alice, bob, charlie)},
        tasks={
            "review": review,
            "modularize": modularize,
            "new_class": new_class,
            "review_docs": review_docs,
            "composite": composite,
        },
    )


def run_demo(indent_width: int = 2) -> tuple[DemoProject, str]:
    """Replay the sample scenario and return the final progress report."""
    demo = build_demo_project()
    project, users, tasks = demo.project, demo.users, demo.tasks

    for key in ("review", "modularize", "new_class", "review_docs", "composite"):
        project.add_task(tasks[key])

    project.assign_task(tasks["review"], users["Alice"])
    project.assign_task(tasks["modularize"], users["Bob"])
    project.assign_task(tasks["composite"], users["Alice"])
    project.assign_task(tasks["review_docs"], users["Charlie"])

    project.remove_task(tasks["review_docs"])

    project.complete_task(tasks["review"], datetime(2024, 1, 14))
    project.complete_task(tasks["composite"], datetime(2024, 1, 26))

    late = SimpleTask("Test new method", datetime(2024, 1, 10), owner=users["Alice"])
    tasks["late"] = late
    project.add_task(late)
    project.assign_task(late, users["Alice"])
    project.complete_task(late, datetime(2024, 1, 12))

    return demo, project.generate_progress_report(indent_width)
