"""Template CLI commands."""

import typer
from rich.table import Table

from burner.interfaces.cli.common import console, get_catalog, get_config, print_header


def templates() -> None:
    """List available templates.

    Templates are scripts in the templates directory. Add a .sh, .py,
    .ps1 or .bat file there and its name becomes a template. Put
    'burner:interactive' in the first lines of a script to run it
    attached to the terminal.

    Example:
        burner templates
    """
    catalog = get_catalog(get_config())
    descriptors = catalog.list_with_details()

    print_header("Templates")

    if not descriptors:
        typer.echo(f"No templates found in {catalog.templates_dir}")
        return

    table = Table(header_style="bold orange_red1", border_style="grey50")
    table.add_column("Name", style="blue", no_wrap=True)
    table.add_column("Type")
    table.add_column("File", style="grey50")

    for descriptor in descriptors:
        kind = "built-in" if descriptor.is_built_in else "custom"
        if descriptor.is_interactive:
            kind += " (interactive)"
        table.add_row(descriptor.name, kind, descriptor.filename)

    console.print(table)
    console.print(f"\nTemplates directory: [grey50]{catalog.templates_dir}[/]")


__all__ = ["templates"]
