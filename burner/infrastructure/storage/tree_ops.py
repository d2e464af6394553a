"""Directory tree copy and move primitives used by imports.

Both functions raise OSError (or its subclass shutil.Error) on failure;
the repository converts those into a failed ImportResult.
"""

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_tree(source: Path, destination: Path) -> None:
    """Recursively copy `source` into `destination`.

    Symbolic links are recreated as links instead of copying what they
    point to. The destination may already exist (it is usually created
    by the caller ahead of the import).
    """
    logger.debug(f"Copying {source} -> {destination}")
    shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)


def move_contents(source: Path, destination: Path) -> None:
    """Move every entry of `source` into `destination`.

    The source directory itself is left in place, empty: the process that
    invoked the import may have it as its working directory.

    Raises:
        FileExistsError: If an entry with the same name already exists in
            the destination. Entries moved before the collision stay moved.
    """
    destination.mkdir(parents=True, exist_ok=True)

    for entry in sorted(source.iterdir()):
        target = destination / entry.name
        if os.path.lexists(target):
            raise FileExistsError(
                f"Cannot move '{entry}' to '{target}': "
                "an entry with the same name already exists"
            )
        logger.debug(f"Moving {entry} -> {target}")
        shutil.move(str(entry), str(target))
