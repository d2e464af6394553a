"""Project domain package.

This package contains the burner project model - the directory-encoded
record, dated-name helpers, and the events raised when projects are
created or imported.
"""

from burner.domain.project.events import ProjectCreated, ProjectImported
from burner.domain.project.models import (
    CUSTOM_MARKER,
    ProjectRecord,
    TemplateKind,
    detect_template,
)
from burner.domain.project.naming import (
    dated_name,
    find_project,
    find_similar,
    matches_query,
    parse_name_date,
    sort_newest_first,
)

__all__ = [
    "CUSTOM_MARKER",
    "ProjectCreated",
    "ProjectImported",
    "ProjectRecord",
    "TemplateKind",
    "dated_name",
    "detect_template",
    "find_project",
    "find_similar",
    "matches_query",
    "parse_name_date",
    "sort_newest_first",
]
