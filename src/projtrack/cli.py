"""projtrack CLI.

Installed as the ``projtrack`` console_script.
"""

from __future__ import annotations

import click

from projtrack import __version__
from projtrack.config import Config

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _build_config(ctx: click.Context, indent: int | None) -> Config:
    from projtrack import log as plog

    parent_params = ctx.parent.params if ctx.parent else {}
    cfg = Config(indent_width=indent, verbose=parent_params.get("verbose", False))
    plog.set_verbose(cfg.verbose)
    return cfg


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="projtrack")
def main(verbose: bool) -> None:
    """projtrack: hierarchical task tracking for a project.

    \b
    EXAMPLES:
      projtrack demo                  # Run the built-in sample project
      projtrack report project.json   # Print the progress report of a project file
      projtrack demo --indent 4       # Wider indentation per level
    """


@main.command()
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Spaces per report level")
@click.pass_context
def demo(ctx: click.Context, indent: int | None) -> None:
    """Run the sample project and print its progress report."""
    from projtrack import log as plog
    from projtrack.demo import run_demo

    cfg = _build_config(ctx, indent)
    _, report = run_demo(cfg.indent_width)
    plog.plain(report)


@main.command()
@click.argument("project_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Spaces per report level")
@click.pass_context
def report(ctx: click.Context, project_file: str, indent: int | None) -> None:
    """Load PROJECT_FILE (JSON) and print its progress report."""
    from projtrack import log as plog
    from projtrack.errors import ProjectFileError
    from projtrack.loader import load_project

    cfg = _build_config(ctx, indent)
    try:
        project = load_project(project_file)
    except ProjectFileError as exc:
        raise click.ClickException(str(exc)) from exc
    plog.plain(project.generate_progress_report(cfg.indent_width))
