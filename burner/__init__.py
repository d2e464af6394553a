"""Burner - disposable, dated project directories.

Create throwaway projects from templates, list them, import existing
folders, and burn them once they get old.
"""

__version__ = "1.0.0"
