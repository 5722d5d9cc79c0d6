"""
Handles the 'project' command group for project snapshot files.
"""

from pathlib import Path

import click

from ..cli_utils import standard_command, add_common_options
from ..domain import ModuleRecord
from ..infra import InMemoryProjectModel, ProjectFile
from ..exit_codes import CommandError, USAGE_ERROR
from ..output import emit_success


def example_project_model():
    """Example modules covering each module type."""
    return InMemoryProjectModel([
        ModuleRecord.create("app", ["Android", "Kotlin"], "GRADLE"),
        ModuleRecord.create("server", ["Kotlin", "Spring"], "GRADLE"),
        ModuleRecord.create("tools", ["Kotlin"], "KOBALT"),
        ModuleRecord.create("scratch"),
    ])


@click.group("project")
def project_cmd():
    """Project snapshot file commands."""
    pass


@project_cmd.command("init")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@add_common_options('quiet')
@standard_command
def init_project(path, force, quiet):
    """Write an example project snapshot file to PATH.

    The format follows the suffix: .json (default) or .yaml/.yml.
    """
    if path.exists() and not force:
        raise CommandError(f"{path} already exists (use --force to overwrite)", USAGE_ERROR)

    model = example_project_model()
    ProjectFile(path).write(model)
    if not quiet:
        emit_success(f"Wrote {path}", data={"path": str(path), "modules": len(model)})


@project_cmd.command("modules")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@add_common_options('pretty', 'quiet')
@standard_command
def list_modules(path, pretty, quiet):
    """List the modules recorded in a project snapshot file."""
    return ProjectFile(path).load_model().records()
