"""Statistics CLI command."""

import calendar

import typer
from rich.table import Table

from burner.application import compute_stats, format_size
from burner.interfaces.cli.common import console, get_config, get_repository, print_header

BAR_WIDTH = 20


def _bar(count: int, largest: int) -> str:
    filled = round(BAR_WIDTH * count / largest) if largest else 0
    return "█" * filled


def stats() -> None:
    """Show statistics about burner projects.

    Example:
        burner stats
    """
    config = get_config()
    repository = get_repository(config)
    projects = repository.list_all()

    if not projects:
        typer.echo("No burner projects found.")
        return

    sizes = {p.path: repository.directory_size(p) for p in projects}
    summary = compute_stats(projects, config.auto_clean_days, sizes)

    print_header("Burner Statistics")
    console.print(f"  [bold]Projects:[/]     {summary.total}")
    console.print(f"  [bold]Disk usage:[/]   {format_size(summary.total_bytes)}")
    console.print(f"  [bold]Average age:[/]  {summary.average_age:.1f} days")
    if config.auto_clean_days > 0:
        console.print(
            f"  [bold]Due for burn:[/] [red]{summary.due_for_cleanup}[/]"
            f" (older than {config.auto_clean_days} days)"
        )

    largest = max((count for _, count in summary.by_template), default=0)
    table = Table(title="By template", header_style="bold orange_red1", border_style="grey50")
    table.add_column("Template", style="blue")
    table.add_column("Count", justify="right")
    table.add_column("")
    for template, count in summary.by_template:
        table.add_row(template, str(count), f"[orange_red1]{_bar(count, largest)}[/]")
    console.print()
    console.print(table)

    ages = summary.by_age
    table = Table(title="By age", header_style="bold orange_red1", border_style="grey50")
    table.add_column("Age")
    table.add_column("Count", justify="right")
    table.add_row("[green]< 7 days[/]", str(ages.fresh))
    table.add_row("[yellow]7-30 days[/]", str(ages.recent))
    table.add_row("[red]30-90 days[/]", str(ages.old))
    table.add_row("[bold red]90+ days[/]", str(ages.ancient))
    console.print(table)

    largest = max((count for _, count in summary.by_month), default=0)
    table = Table(title="Created per month", header_style="bold orange_red1", border_style="grey50")
    table.add_column("Month")
    table.add_column("Count", justify="right")
    table.add_column("")
    for (year, month), count in summary.by_month:
        label = f"{calendar.month_abbr[month]} {year}"
        table.add_row(label, str(count), f"[orange_red1]{_bar(count, largest)}[/]")
    console.print(table)


__all__ = ["stats"]
