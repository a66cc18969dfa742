"""Tests for projtrack.report line format and indentation."""

from __future__ import annotations

from datetime import datetime

from projtrack.report import format_task_line, render_report, report_header


def test_header():
    assert report_header("Ship it") == 'Progress Report for Project "Ship it":\n'


def test_task_line_top_level(make_simple):
    line = format_task_line(make_simple("Review code"), 0)
    assert line == "- Description: Review code, Status: In progress, Progress: 0%\n"


def test_task_line_indent_width(make_simple):
    line = format_task_line(make_simple("x"), 2, indent_width=3)
    assert line.startswith("      - Description: x,")


def test_render_nested(make_simple, make_composite):
    done = make_simple("Review code")
    done.complete(datetime(2024, 1, 14))
    c = make_composite("Composite", [done, make_simple("Modularize code")])
    out = render_report("Demo", [c])
    assert out == (
        'Progress Report for Project "Demo":\n'
        "- Description: Composite, Status: In progress, Progress: 50%\n"
        "  - Description: Review code, Status: Completed, Progress: 100%\n"
        "  - Description: Modularize code, Status: In progress, Progress: 0%\n"
    )


def test_render_empty():
    assert render_report("Empty", []) == 'Progress Report for Project "Empty":\n'


def test_render_does_not_mutate(make_simple, make_composite):
    leaf = make_simple("leaf")
    c = make_composite("c", [leaf])
    render_report("p", [c])
    assert leaf.completion_date is None
    assert c.subtasks == [leaf]
