"""Status lines for project operations, colored via Rich.

Every operation reports through these helpers: ``success`` for assignments,
completions and removals, ``warn`` for late completions and subtasks outside
the project, ``error`` for ineligible users and unknown tasks.  All levels
share one console so status lines come out in the order operations run.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def info(msg: str) -> None:
    console.print(f"[blue]\\[INFO][/blue] {escape(msg)}")


def success(msg: str) -> None:
    console.print(f"[green]\\[OK][/green] {escape(msg)}")


def warn(msg: str) -> None:
    console.print(f"[yellow]\\[WARN][/yellow] {escape(msg)}")


def error(msg: str) -> None:
    console.print(f"[red]\\[ERROR][/red] {escape(msg)}")


def debug(msg: str) -> None:
    if _verbose:
        console.print(f"[dim]\\[DEBUG] {escape(msg)}[/dim]")


def plain(text: str) -> None:
    """Print *text* verbatim (no markup, no highlighting, no wrapping)."""
    console.print(text, markup=False, end="", soft_wrap=True)
