"""CLI commands for Burner.

Each module provides plain command functions that are registered with
the main Typer app in burner.interfaces.cli.

Modules:
- project: new, list, burn, open, import
- template: templates
- config: config
- stats: stats
"""

from burner.interfaces.cli.commands import config, project, stats, template

__all__ = ["project", "template", "config", "stats"]
