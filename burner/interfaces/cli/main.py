"""Entry point for the Burner CLI.

This module provides the main entry point for the Burner CLI.
It imports the Typer app and runs it.

Usage:
    python -m burner.interfaces.cli.main

Or via installed entry point:
    burner <command>
"""

from burner.interfaces.cli import app


def main() -> None:
    """Run the Burner CLI application."""
    app()


if __name__ == "__main__":
    main()
