"""Application service layer for Burner.

Use cases that combine the domain with the infrastructure:

    project_service - Create projects from templates
    import_service - Import existing folders (with rollback on failure)
    stats_service - Summaries for the stats command

Example usage:
    >>> from burner.application import ProjectCreator
    >>> from burner.domain.shared import is_ok
    >>>
    >>> result = creator.create("web", "quick-test")
    >>> if is_ok(result):
    ...     print(f"Created {result.value.path}")
"""

from burner.application.import_service import (
    StagedDestination,
    import_directory,
    remove_if_empty,
    staged_destination,
)
from burner.application.project_service import ProjectCreator, validate_short_name
from burner.application.stats_service import (
    AgeBuckets,
    ProjectStats,
    compute_stats,
    format_size,
)

__all__ = [
    # Project service
    "ProjectCreator",
    "validate_short_name",
    # Import service
    "StagedDestination",
    "import_directory",
    "remove_if_empty",
    "staged_destination",
    # Stats service
    "AgeBuckets",
    "ProjectStats",
    "compute_stats",
    "format_size",
]
