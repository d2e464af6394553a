"""CLI interface for Burner using Typer.

This module provides the command-line interface for Burner, a manager
for short-lived experiment projects.

Usage:
    burner new web quick-test   # Create a project from a template
    burner list                 # List projects, newest first
    burner open quick-test      # Print the project path
    burner burn                 # Delete projects past the age limit

The CLI is structured as:
- app: Main Typer application
- commands/: Command implementations
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from burner import __version__
from burner.interfaces.cli.commands import config, project, stats, template

# Create the main Typer application
app = typer.Typer(
    name="burner",
    help="Create, track and burn throwaway experiment projects",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"burner version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
) -> None:
    """Burner - throwaway projects that clean up after themselves.

    Projects live in dated folders (YYMMDD-name) under the burner home
    and are burned once they pass the configured age.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# Register Commands
# =============================================================================

app.command("new")(project.new)
app.command("list")(project.list_projects)
app.command("burn")(project.burn)
app.command("open")(project.open_project)
app.command("import")(project.import_folder)
app.command("templates")(template.templates)
app.command("config")(config.config)
app.command("stats")(stats.stats)

# Short aliases
app.command("ls", hidden=True)(project.list_projects)
app.command("rm", hidden=True)(project.burn)


__all__ = ["app"]
