"""Project CLI commands.

Commands for creating, listing, burning, opening and importing burner
projects.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from burner.application import ProjectCreator, import_directory, remove_if_empty
from burner.domain.project import ProjectRecord, find_similar
from burner.domain.shared import Err
from burner.domain.template import ImportMode
from burner.infrastructure.storage import ProjectRepository
from burner.interfaces.cli.common import (
    console,
    format_age,
    get_catalog,
    get_config,
    get_repository,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    select_projects,
)
from burner.interfaces.cli.launcher import open_in_editor, open_in_file_browser

NO_PROJECTS_HINT = "Create one with: burner new <template> <name>"


# =============================================================================
# new
# =============================================================================


def new(
    template: str = typer.Argument(..., help="Template to use (dotnet, web, or custom)"),
    name: str = typer.Argument(..., help="Project name"),
    directory: Optional[str] = typer.Option(
        None,
        "--directory",
        "-d",
        help="Target directory (default: burner home)",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Attach the template script to this terminal",
    ),
) -> None:
    """Create a new burner project from a template.

    Example:
        burner new web quick-test
    """
    config = get_config()
    repository = get_repository(config)
    catalog = get_catalog(config)

    available = catalog.list_available()
    if template.lower() not in {t.lower() for t in available}:
        print_error(f"Unknown template: {template}")
        typer.echo(f"Available templates: {', '.join(available)}")
        raise typer.Exit(1)

    creator = ProjectCreator(repository, catalog)
    destination = creator.destination_for(name.strip(), directory)
    existed = destination.exists()

    if interactive or catalog.is_interactive(template):
        result = creator.create(template, name, directory, interactive=True)
    else:
        with console.status(f"[orange_red1]Igniting[/] [yellow]{template}[/] project [white]{name}[/]..."):
            result = creator.create(template, name, directory)

    if isinstance(result, Err):
        if not existed:
            remove_if_empty(destination)
        print_error(result.error)
        raise typer.Exit(1)

    print_success(f"Project created at {result.value.path}")


# =============================================================================
# list
# =============================================================================


def list_projects(
    show_all: bool = typer.Option(False, "--all", "-a", help="Show project paths"),
) -> None:
    """List all burner projects, newest first.

    Example:
        burner list -a
    """
    projects = get_repository(get_config()).list_all()

    if not projects:
        typer.echo("No burner projects found.")
        typer.echo(NO_PROJECTS_HINT)
        return

    table = Table(header_style="bold orange_red1", border_style="grey50")
    table.add_column("Name", style="blue", no_wrap=True)
    table.add_column("Template")
    table.add_column("Age", no_wrap=True)
    if show_all:
        table.add_column("Path", style="grey50")

    for project in projects:
        row = [project.name, project.template, format_age(project.age_in_days)]
        if show_all:
            row.append(str(project.path))
        table.add_row(*row)

    print_header("Projects")
    console.print(table)
    console.print(f"\nTotal: [orange_red1]{len(projects)}[/] project(s)")


# =============================================================================
# burn
# =============================================================================


def burn(
    name: Optional[str] = typer.Argument(None, help="Project to delete"),
    days: Optional[int] = typer.Option(
        None,
        "--days",
        "-d",
        help="Delete projects older than this many days",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Select projects to delete",
    ),
    all_projects: bool = typer.Option(False, "--all", "-a", help="Delete ALL projects"),
) -> None:
    """Delete projects: one by name, a selection, all, or those past the age limit.

    Without arguments, deletes projects older than the configured
    auto-clean threshold.

    Example:
        burner burn --days 30
        burner burn my-experiment -f
    """
    config = get_config()
    repository = get_repository(config)

    if all_projects:
        _burn_all(repository, force)
    elif interactive:
        _burn_selected(repository)
    elif name:
        _burn_one(repository, name, force)
    else:
        _burn_old(repository, config.auto_clean_days if days is None else days, force)


def _delete_each(repository: ProjectRepository, projects: list[ProjectRecord]) -> int:
    deleted = 0
    with console.status("[orange_red1]Burning projects...[/]"):
        for project in projects:
            if repository.delete(project.name):
                deleted += 1
    return deleted


def _burn_all(repository: ProjectRepository, force: bool) -> None:
    projects = repository.list_all()
    if not projects:
        typer.echo("No burner projects to delete.")
        return

    print_info(f"Found {len(projects)} project(s):")
    for project in projects:
        typer.echo(f"  {project.name} ({project.age_in_days} days old)")

    if not force:
        print_warning("This will permanently delete ALL burner projects!")
        if not typer.confirm(f"Delete all {len(projects)} project(s)?", default=False):
            typer.echo("Cancelled.")
            return

    deleted = _delete_each(repository, projects)
    print_success(f"Burned {deleted} project(s)")


def _burn_selected(repository: ProjectRepository) -> None:
    projects = repository.list_all()
    if not projects:
        typer.echo("No burner projects to delete.")
        return

    print_header("Select Projects to Burn")
    selected = select_projects(
        projects, "Projects to delete (e.g. 1,3; empty to cancel)", multiple=True
    )
    if not selected:
        typer.echo("No projects selected.")
        return

    print_info(f"Selected {len(selected)} project(s) for deletion:")
    for project in selected:
        typer.echo(f"  {project.name}")

    if not typer.confirm("Permanently delete these projects?", default=False):
        typer.echo("Cancelled.")
        return

    deleted = _delete_each(repository, selected)
    print_success(f"Burned {deleted} project(s)")


def _burn_one(repository: ProjectRepository, name: str, force: bool) -> None:
    project = repository.find(name)
    if project is None:
        print_error(f"Project not found: {name}")
        raise typer.Exit(1)

    if not force and not typer.confirm(f"Delete project {project.name}?", default=False):
        typer.echo("Cancelled.")
        return

    if not repository.delete(project.name):
        print_error(f"Failed to delete {project.name}")
        raise typer.Exit(1)

    print_success(f"Deleted {project.name}")


def _burn_old(repository: ProjectRepository, days: int, force: bool) -> None:
    if days <= 0:
        print_warning("Auto-cleanup is disabled. Use --days to specify cleanup age.")
        return

    expired = [p for p in repository.list_all() if p.age_in_days > days]
    if not expired:
        typer.echo(f"No projects older than {days} days.")
        return

    print_info(f"Found {len(expired)} project(s) older than {days} days:")
    for project in expired:
        typer.echo(f"  {project.name} ({project.age_in_days} days old)")

    if not force and not typer.confirm(f"Delete these {len(expired)} project(s)?", default=False):
        typer.echo("Cancelled.")
        return

    deleted = repository.cleanup(days)
    print_success(f"Deleted {deleted} project(s)")


# =============================================================================
# open
# =============================================================================

EDITOR_ACTION = "editor"
EXPLORER_ACTION = "explorer"
PATH_ACTION = "path"


def open_project(
    name: Optional[str] = typer.Argument(None, help="Project to open (interactive if omitted)"),
    explorer: bool = typer.Option(False, "--explorer", "-e", help="Open in the file browser"),
    code: bool = typer.Option(False, "--code", "-c", help="Open in the configured editor"),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Select the project from a list",
    ),
) -> None:
    """Open a project, or print its path.

    Printing the path makes `cd "$(burner open my-experiment)"` work.

    Example:
        burner open my-experiment -c
    """
    config = get_config()
    repository = get_repository(config)

    if not name or interactive:
        project = _select_project(repository)
        if project is None:
            return
        action = _select_action(config.editor)
    else:
        project = repository.find(name)
        if project is None:
            print_error(f"Project not found: {name}")
            similar = find_similar(repository.list_all(), name)
            if similar:
                typer.echo("Did you mean:")
                for p in similar:
                    typer.echo(f"  {p.name}")
            raise typer.Exit(1)
        action = EDITOR_ACTION if code else EXPLORER_ACTION if explorer else PATH_ACTION

    if action == EDITOR_ACTION:
        if not open_in_editor(project.path, config.editor):
            print_error(f"Failed to open {config.editor}. Is it installed and in PATH?")
            raise typer.Exit(1)
        print_success(f"Opened in {config.editor}: {project.path}")
    elif action == EXPLORER_ACTION:
        if not open_in_file_browser(project.path):
            print_error("Failed to open file browser")
            raise typer.Exit(1)
        print_success(f"Opened in file browser: {project.path}")
    else:
        typer.echo(str(project.path))


def _select_project(repository: ProjectRepository) -> ProjectRecord | None:
    projects = repository.list_all()
    if not projects:
        typer.echo("No burner projects found.")
        typer.echo(NO_PROJECTS_HINT)
        return None

    print_header("Select Project to Open")
    selected = select_projects(projects, "Project number")
    return selected[0] if selected else None


def _select_action(editor: str) -> str:
    typer.echo()
    typer.echo(f"  1. Open in editor ({editor})")
    typer.echo("  2. Open in file browser")
    typer.echo("  3. Print path")
    choice = typer.prompt("How do you want to open it?", type=typer.IntRange(1, 3), default=3)
    return {1: EDITOR_ACTION, 2: EXPLORER_ACTION}.get(choice, PATH_ACTION)


# =============================================================================
# import
# =============================================================================


def import_folder(
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Name for the imported project (default: current folder name)",
    ),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the folder instead of moving it"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation when moving"),
) -> None:
    """Import the current folder as a burner project.

    The folder is moved into the burner home unless --copy is given. A
    moved folder is left behind empty.

    Example:
        burner import --copy --name scratch
    """
    repository = get_repository(get_config())
    source = Path.cwd()

    typer.echo(f"Importing: {source.name}")
    typer.echo(f"Source: {source}")

    if not copy and not force:
        print_warning("The current folder will be moved to the burner home directory.")
        if not typer.confirm("Do you want to proceed?", default=False):
            typer.echo("Import cancelled.")
            return

    mode = ImportMode.COPY if copy else ImportMode.MOVE
    result = import_directory(repository, source, name, mode)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    event = result.value
    operation = "copied" if event.copied else "moved"
    print_success(f"Project {operation} to {event.path}")
    typer.echo("Template: custom")

    if not event.copied:
        typer.echo(f'Tip: run cd "{event.path}" to go to your project.')
        typer.echo("The original folder is now empty and can be deleted.")


__all__ = ["new", "list_projects", "burn", "open_project", "import_folder"]
