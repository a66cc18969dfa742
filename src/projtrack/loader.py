"""Build a :class:`Project` from a JSON project file.

Dates are ISO-8601.  Values carrying a UTC offset are converted to naive UTC
so that every date in a project compares against every other.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from projtrack import log
from projtrack.errors import ProjectFileError
from projtrack.project import Project
from projtrack.tasks.model import CompositeTask, SimpleTask, Task, User


def _parse_date(value: Any, where: str) -> datetime:
    if not isinstance(value, str):
        raise ProjectFileError(f"{where}: expected an ISO date string, got {value!r}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ProjectFileError(f"{where}: invalid date {value!r}") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ProjectFileError(f"{where}: missing required key '{key}'")
    return data[key]


def _list_of(data: dict[str, Any], key: str, where: str) -> list[Any]:
    """Return ``data[key]`` (default empty) after checking it is a JSON array."""
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ProjectFileError(f"{where}.{key}: expected a list, got {type(value).__name__}")
    return value


def _name(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ProjectFileError(f"{where}: expected a user name string, got {value!r}")
    return value


def _lookup_user(users: dict[str, User], name: Any, where: str) -> User:
    user = users.get(_name(name, where))
    if user is None:
        raise ProjectFileError(f"{where}: unknown user '{name}'")
    return user


def _build_task(entry: Any, users: dict[str, User], where: str) -> Task:
    if not isinstance(entry, dict):
        raise ProjectFileError(f"{where}: expected an object")

    description = str(_require(entry, "description", where))
    where = f'{where} ("{description}")'
    deadline = _parse_date(_require(entry, "deadline", where), f"{where}.deadline")

    if "subtasks" in entry:
        subtasks = [
            _build_task(sub, users, f"{where}.subtasks[{i}]")
            for i, sub in enumerate(_list_of(entry, "subtasks", where))
        ]
        owners = [
            _lookup_user(users, n, f"{where}.owners")
            for n in _list_of(entry, "owners", where)
        ]
        return CompositeTask(description, deadline, subtasks=subtasks, owners=owners)

    owner_name = entry.get("owner")
    owner = _lookup_user(users, owner_name, f"{where}.owner") if owner_name is not None else None
    return SimpleTask(description, deadline, owner=owner)


def _complete_nested(task: Task, entry: dict[str, Any], where: str) -> None:
    """Apply ``completed_on`` to subtasks; top-level tasks go through the project."""
    for i, (child, sub) in enumerate(zip(task.children(), entry.get("subtasks", []))):
        sub_where = f"{where}.subtasks[{i}]"
        _complete_nested(child, sub, sub_where)
        if "completed_on" in sub:
            child.complete(_parse_date(sub["completed_on"], f"{sub_where}.completed_on"))


def project_from_dict(data: dict[str, Any]) -> Project:
    """Create a project, add its tasks, then replay assignments and completions."""
    if not isinstance(data, dict):
        raise ProjectFileError("project file must contain a JSON object")

    names = [_name(n, "project.users") for n in _list_of(data, "users", "project")]
    users = {name: User(name) for name in names}
    project = Project(
        str(_require(data, "objectives", "project")),
        _parse_date(_require(data, "deadline", "project"), "project.deadline"),
        list(users.values()),
    )
    for user in users.values():
        user.projects.append(project)

    entries = _list_of(data, "tasks", "project")
    built: list[tuple[Task, dict[str, Any], str]] = []
    for i, entry in enumerate(entries):
        where = f"tasks[{i}]"
        task = _build_task(entry, users, where)
        _complete_nested(task, entry, where)
        project.add_task(task)
        built.append((task, entry, where))

    # Validate everything before the first assignment or completion mutates state.
    assignments = [
        (task, _lookup_user(users, name, f"{where}.assignees"))
        for task, entry, where in built
        for name in _list_of(entry, "assignees", where)
    ]
    completions = [
        (task, _parse_date(entry["completed_on"], f"{where}.completed_on"))
        for task, entry, where in built
        if "completed_on" in entry
    ]

    for task, user in assignments:
        project.assign_task(task, user)
    for task, completed_on in completions:
        project.complete_task(task, completed_on)

    return project


def load_project(path: Path | str) -> Project:
    """Read *path* as UTF-8 JSON and build the project it describes."""
    p = path if isinstance(path, Path) else Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ProjectFileError(f"cannot read {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ProjectFileError(f"{p}: invalid JSON ({exc})") from exc
    project = project_from_dict(data)
    log.info(f"Loaded {len(project.tasks)} top-level task(s) from {p}")
    return project
