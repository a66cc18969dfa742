"""End-to-end check of the built-in sample project."""

from __future__ import annotations

from projtrack.demo import build_demo_project, run_demo
from projtrack.tasks.model import TaskStatus


EXPECTED_REPORT = (
    'Progress Report for Project "Software implementation":\n'
    "- Description: Review code, Status: Completed, Progress: 100%\n"
    "- Description: Modularize code, Status: In progress, Progress: 0%\n"
    "- Description: Create new class, Status: In progress, Progress: 0%\n"
    "- Description: Composite Task 1, Status: Completed, Progress: 100%\n"
    "  - Description: Review code, Status: Completed, Progress: 100%\n"
    "  - Description: Modularize code, Status: In progress, Progress: 0%\n"
    "- Description: Test new method, Status: Completed, Progress: 100%\n"
)


def test_build_runs_no_operations():
    demo = build_demo_project()
    assert demo.project.tasks == []
    assert all(not u.assigned_tasks for u in demo.users.values())


def test_final_report():
    _, report = run_demo()
    assert report == EXPECTED_REPORT


def test_final_state():
    demo, _ = run_demo()
    t, u = demo.tasks, demo.users
    assert demo.project.tasks == [
        t["review"], t["modularize"], t["new_class"], t["composite"], t["late"],
    ]
    # "Review code" and "Modularize code" are top-level, so assigning the
    # composite hands them to Alice as well.
    assert u["Alice"].assigned_tasks == [
        t["review"], t["review"], t["modularize"], t["composite"], t["late"],
    ]
    assert u["Bob"].assigned_tasks == [t["modularize"]]
    assert u["Charlie"].assigned_tasks == []


def test_deadlines():
    demo, _ = run_demo()
    t = demo.tasks
    assert t["review"].check_deadline_violation() is False
    assert t["composite"].check_deadline_violation() is True
    assert t["late"].check_deadline_violation() is True
    assert t["modularize"].status == TaskStatus.IN_PROGRESS


def test_warnings_emitted(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert out.count("after its deadline") == 2
