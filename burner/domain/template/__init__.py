"""Template domain package.

Template descriptors, the script environment contract, and the execution
and import modes.
"""

from burner.domain.template.models import (
    BUILT_IN_TEMPLATES,
    INTERACTIVE_MARKER,
    MARKER_SCAN_LINES,
    SCRIPT_EXTENSIONS,
    ExecutionMode,
    ImportMode,
    TemplateDescriptor,
    TemplateEnvironment,
    has_interactive_marker,
    is_built_in,
    is_script,
)

__all__ = [
    "BUILT_IN_TEMPLATES",
    "INTERACTIVE_MARKER",
    "MARKER_SCAN_LINES",
    "SCRIPT_EXTENSIONS",
    "ExecutionMode",
    "ImportMode",
    "TemplateDescriptor",
    "TemplateEnvironment",
    "has_interactive_marker",
    "is_built_in",
    "is_script",
]
