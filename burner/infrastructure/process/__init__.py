"""Process infrastructure: launching template scripts."""

from burner.infrastructure.process.runner import (
    EXIT_NOT_STARTED,
    TemplateRunner,
    build_command,
)

__all__ = [
    "EXIT_NOT_STARTED",
    "TemplateRunner",
    "build_command",
]
