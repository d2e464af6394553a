"""Import service.

Brings an existing folder into the burner home. The destination is
resolved first, then created (and, for moves, entered) before any data
moves, so that moving the folder a shell is sitting in does not pull the
working directory out from under the process. If the import does not go
through, the previous working directory is restored and the empty
destination removed.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from burner.application.project_service import validate_short_name
from burner.domain.project import ProjectImported
from burner.domain.shared import Err, Ok, Result
from burner.domain.template import ImportMode
from burner.infrastructure.storage import ProjectRepository

logger = logging.getLogger(__name__)


@dataclass
class StagedDestination:
    """A destination directory that is rolled back unless committed."""

    path: Path
    committed: bool = False

    def commit(self) -> None:
        """Keep the destination (and the working directory change)."""
        self.committed = True


def remove_if_empty(path: Path) -> bool:
    """Remove a directory if it exists and has no entries.

    Returns:
        True if the directory was removed.
    """
    try:
        if path.is_dir() and not any(path.iterdir()):
            path.rmdir()
            logger.debug(f"Removed empty directory {path}")
            return True
    except OSError as e:
        logger.debug(f"Could not remove {path}: {e}")
    return False


@contextmanager
def staged_destination(path: Path, enter: bool = False) -> Iterator[StagedDestination]:
    """Create a destination directory for the duration of an operation.

    Args:
        path: Directory to create. Must not exist yet.
        enter: Also make it the working directory.

    Yields:
        StagedDestination; call commit() once the operation succeeded.
        Otherwise, on exit, the previous working directory is restored and
        the destination is removed if nothing was written into it.

    Raises:
        OSError: If the directory cannot be created.
    """
    previous_cwd = os.getcwd() if enter else None
    path.mkdir(parents=True)
    staged = StagedDestination(path=path)
    try:
        if enter:
            os.chdir(path)
        yield staged
    finally:
        if not staged.committed:
            if previous_cwd is not None:
                try:
                    os.chdir(previous_cwd)
                except OSError as e:
                    logger.warning(f"Could not return to {previous_cwd}: {e}")
            remove_if_empty(path)


def import_directory(
    repository: ProjectRepository,
    source: str | Path,
    short_name: str | None = None,
    mode: ImportMode = ImportMode.MOVE,
) -> Result[ProjectImported, str]:
    """Import a folder into the burner home as a dated custom project.

    Args:
        repository: Repository over the burner home.
        source: Folder to import.
        short_name: Project name (default: the folder's name).
        mode: MOVE (default) or COPY.

    Returns:
        Ok(ProjectImported) on success, Err(str) otherwise. Collisions
        and invalid names are detected before anything is written.
    """
    source = Path(source).resolve()
    if not source.is_dir():
        return Err(f"Source folder does not exist: {source}")

    name_result = validate_short_name(short_name or source.name)
    if isinstance(name_result, Err):
        return name_result

    home = repository.home.resolve()
    if source.is_relative_to(home):
        return Err("Folder is already inside the burner home directory")
    if home.is_relative_to(source):
        return Err("Folder contains the burner home directory")

    try:
        destination = repository.resolve_import_destination(name_result.value)
    except OSError as e:
        return Err(f"Cannot create burner home {repository.home}: {e}")
    if destination is None:
        return Err("A project with this name already exists")

    try:
        with staged_destination(destination, enter=mode is ImportMode.MOVE) as staged:
            result = repository.import_project(source, destination, mode)
            if result.success:
                staged.commit()
    except OSError as e:
        logger.warning(f"Import of {source} failed: {e}")
        return Err(f"Failed to import project: {e}")

    if not result.success:
        return Err("Failed to import project")

    return Ok(
        ProjectImported(
            source=source,
            path=destination,
            copied=mode is ImportMode.COPY,
        )
    )
