"""Template infrastructure: the catalog over the templates directory and
the default scripts of the built-in templates."""

from burner.infrastructure.templates.builtin import builtin_extension, builtin_script
from burner.infrastructure.templates.catalog import TemplateCatalog

__all__ = [
    "TemplateCatalog",
    "builtin_extension",
    "builtin_script",
]
