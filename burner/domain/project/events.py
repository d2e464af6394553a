"""Project domain events.

Returned by the application layer when a project lands in the burner
home, carrying the names and paths the CLI needs to report the outcome.

All events are pure data structures - no I/O, no side effects.
"""

from pathlib import Path

from burner.domain.shared.events import DomainEvent


class ProjectCreated(DomainEvent):
    """Event raised when a template script scaffolded a new project."""

    template: str
    name: str
    dated_name: str
    path: Path


class ProjectImported(DomainEvent):
    """Event raised when an existing folder was imported.

    `copied` is False for a move, in which case the source directory is
    left behind empty.
    """

    source: Path
    path: Path
    copied: bool
