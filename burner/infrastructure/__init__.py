"""Infrastructure layer for Burner.

This module provides the I/O side of Burner: the project repository over
the burner home directory, the template catalog over the templates
directory, and the runner that executes template scripts.

Exports:
    Storage:
        - ProjectRepository: list/find/delete/cleanup/import projects
        - ImportResult: Outcome of an import

    Templates:
        - TemplateCatalog: Discover and resolve template scripts

    Process:
        - TemplateRunner: Run a template script as a child process
"""

from burner.infrastructure.process import TemplateRunner
from burner.infrastructure.storage import ImportResult, ProjectRepository
from burner.infrastructure.templates import TemplateCatalog

__all__ = [
    # Storage
    "ImportResult",
    "ProjectRepository",
    # Templates
    "TemplateCatalog",
    # Process
    "TemplateRunner",
]
