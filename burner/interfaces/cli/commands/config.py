"""Configuration CLI commands."""

from typing import Optional

import typer

from burner.global_config import get_config_path, save_config
from burner.interfaces.cli.common import (
    console,
    get_config,
    print_error,
    print_header,
    print_success,
)
from burner.interfaces.cli.launcher import open_in_file_browser
from burner.models import BurnerConfig


def config(
    home: Optional[str] = typer.Option(None, "--home", help="Set the burner home directory"),
    templates: Optional[str] = typer.Option(
        None, "--templates", help="Set the templates directory"
    ),
    auto_clean_days: Optional[int] = typer.Option(
        None,
        "--auto-clean-days",
        min=0,
        help="Set the auto-clean age in days (0 disables)",
    ),
    editor: Optional[str] = typer.Option(None, "--editor", help="Set the editor command"),
    show: bool = typer.Option(False, "--show", help="Print the current settings"),
    show_path: bool = typer.Option(False, "--path", help="Print the config file path"),
    open_home: bool = typer.Option(False, "--open-home", help="Open the burner home"),
    open_templates: bool = typer.Option(
        False, "--open-templates", help="Open the templates directory"
    ),
) -> None:
    """Show or change the configuration.

    Without options (or with --show), prints the current settings. After
    an update the new settings are printed as well.

    Example:
        burner config --auto-clean-days 14 --editor "code -n"
    """
    current = get_config()

    if show_path:
        typer.echo(str(get_config_path()))
        return

    if open_home or open_templates:
        target = current.home_path if open_home else current.templates_path
        target.mkdir(parents=True, exist_ok=True)
        if not open_in_file_browser(target):
            print_error(f"Failed to open {target}")
            raise typer.Exit(1)
        print_success(f"Opened {target}")
        return

    updates = {
        "burner_home": home,
        "burner_templates": templates,
        "auto_clean_days": auto_clean_days,
        "editor": editor,
    }
    updates = {k: v for k, v in updates.items() if v is not None}

    if updates:
        current = current.model_copy(update=updates)
        save_config(current)
        print_success("Configuration updated")

    _show(current)


def _show(current: BurnerConfig) -> None:
    auto_clean = (
        f"{current.auto_clean_days} days" if current.auto_clean_days > 0 else "disabled"
    )

    print_header("Configuration")
    console.print(f"  [bold]Home:[/]        {current.home_path}")
    console.print(f"  [bold]Templates:[/]   {current.templates_path}")
    console.print(f"  [bold]Auto-clean:[/]  {auto_clean}")
    console.print(f"  [bold]Editor:[/]      {current.editor}")
    console.print(f"\n  [grey50]{get_config_path()}[/]")


__all__ = ["config"]
