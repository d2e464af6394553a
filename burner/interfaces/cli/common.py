"""Shared utilities for Burner CLI commands.

This module provides common utilities used across CLI commands:
- Building the repository and catalog from the user configuration
- Formatted output helpers (error, success, info, warning)
- Age formatting for project listings
- Numbered interactive selection
"""

from collections.abc import Sequence

import typer
from rich.console import Console

from burner.domain.project import ProjectRecord
from burner.global_config import load_config
from burner.infrastructure.storage import ProjectRepository
from burner.infrastructure.templates import TemplateCatalog
from burner.models import BurnerConfig

# Rich console for tables and spinners; resolves stdout at write time
console = Console(highlight=False)


def get_config() -> BurnerConfig:
    """Load the user configuration."""
    return load_config()


def get_repository(config: BurnerConfig) -> ProjectRepository:
    """Build the project repository for the configured burner home."""
    return ProjectRepository(config.home_path)


def get_catalog(config: BurnerConfig) -> TemplateCatalog:
    """Build the template catalog for the configured templates directory."""
    return TemplateCatalog(config.templates_path)


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message.

    Args:
        msg: Warning message to display
    """
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_header(title: str) -> None:
    """Print a section rule with a title."""
    console.print()
    console.rule(f"[bold orange_red1]{title}[/]")
    console.print()


def age_text(days: int) -> str:
    """Human-readable project age: 'today', '1 day', 'N days'."""
    if days == 0:
        return "today"
    if days == 1:
        return "1 day"
    return f"{days} days"


def age_color(days: int) -> str:
    """Rich colour for a project age: green, yellow, then red from 30 days."""
    if days < 7:
        return "green"
    if days < 30:
        return "yellow"
    return "red"


def format_age(days: int) -> str:
    """Project age as Rich markup."""
    color = age_color(days)
    return f"[{color}]{age_text(days)}[/{color}]"


def print_project_choices(projects: Sequence[ProjectRecord]) -> None:
    """Print projects as a numbered list for selection."""
    for i, project in enumerate(projects, 1):
        console.print(
            f"  [bold]{i:>2}[/bold]. [blue]{project.name}[/blue] "
            f"({format_age(project.age_in_days)}) [grey50]- {project.template}[/grey50]"
        )


def parse_selection(answer: str, count: int) -> list[int] | None:
    """Parse a selection like '1, 3 4' into zero-based indexes.

    Returns:
        Sorted unique indexes, an empty list for a blank answer, or None
        if any entry is not a number between 1 and `count`.
    """
    indexes: set[int] = set()
    for part in answer.replace(",", " ").split():
        if not part.isdigit():
            return None
        number = int(part)
        if not 1 <= number <= count:
            return None
        indexes.add(number - 1)
    return sorted(indexes)


def select_projects(
    projects: Sequence[ProjectRecord], prompt: str, multiple: bool = False
) -> list[ProjectRecord]:
    """Let the user pick projects by number.

    Args:
        projects: Projects to choose from.
        prompt: Prompt text.
        multiple: Allow several numbers separated by commas or spaces.

    Returns:
        Selected projects; empty if the user entered nothing.

    Raises:
        typer.Exit: If the answer is not a valid selection.
    """
    print_project_choices(projects)
    typer.echo()

    answer = typer.prompt(prompt, default="", show_default=False)
    indexes = parse_selection(answer, len(projects))
    if indexes is None or (not multiple and len(indexes) > 1):
        print_error(f"Invalid selection: {answer}")
        raise typer.Exit(1)
    return [projects[i] for i in indexes]


__all__ = [
    "console",
    "get_config",
    "get_repository",
    "get_catalog",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "print_header",
    "age_text",
    "age_color",
    "format_age",
    "print_project_choices",
    "parse_selection",
    "select_projects",
]
