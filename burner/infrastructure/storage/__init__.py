"""Storage infrastructure for Burner.

The project repository over the burner home directory and the tree
copy/move primitives behind imports.
"""

from burner.infrastructure.storage.repositories import ImportResult, ProjectRepository
from burner.infrastructure.storage.tree_ops import copy_tree, move_contents

__all__ = [
    "ImportResult",
    "ProjectRepository",
    "copy_tree",
    "move_contents",
]
