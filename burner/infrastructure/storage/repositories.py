"""Repository over the burner home directory.

Every immediate subdirectory of the home directory is one project. The
repository never keeps an index: each call rescans the directory, so the
filesystem is always the source of truth.

Failures never escape as exceptions. Lookups return None, deletions
return False, imports return a failed ImportResult, and the reason is
logged.

Concurrent invocations are not guarded. Two imports racing for the same
destination can both pass resolve_import_destination(); the loser then
fails with a collision during the move or merges into the winner's copy.
"""

import logging
import shutil
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from burner.domain.project.models import CUSTOM_MARKER, ProjectRecord
from burner.domain.project.naming import dated_name, find_project, sort_newest_first
from burner.domain.template.models import ImportMode
from burner.infrastructure.storage.tree_ops import copy_tree, move_contents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    """Result of an import operation.

    Attributes:
        success: Whether the folder was fully imported.
        path: Destination directory on success, None otherwise.
    """

    success: bool
    path: Path | None = None


class ProjectRepository:
    """Operations over the projects stored in the burner home.

    Example:
        repo = ProjectRepository(Path("~/.burner/projects").expanduser())
        for project in repo.list_all():
            print(project.name, project.age_in_days)
    """

    def __init__(self, home: str | Path) -> None:
        """Initialize the repository.

        Args:
            home: Burner home directory containing the project folders.
        """
        self._home = Path(home).expanduser().absolute()

    @property
    def home(self) -> Path:
        """The burner home directory."""
        return self._home

    def list_all(self) -> list[ProjectRecord]:
        """List all projects, newest first.

        Returns:
            Records for every readable project directory; a folder that
            cannot be read is logged and left out. Empty if the home
            directory does not exist.
        """
        if not self._home.is_dir():
            return []

        try:
            entries = sorted(self._home.iterdir())
        except OSError as e:
            logger.warning(f"Error listing projects in {self._home}: {e}")
            return []

        records: list[ProjectRecord] = []
        for folder in entries:
            # A folder that vanished or cannot be read is skipped on its own
            try:
                if not folder.is_dir():
                    continue
                record = ProjectRecord.from_directory(folder)
            except OSError as e:
                logger.warning(f"Skipping unreadable project {folder.name}: {e}")
                continue
            if record is not None:
                records.append(record)

        return sort_newest_first(records)

    def find(self, query: str) -> ProjectRecord | None:
        """Find a project by exact name or by its short name.

        Args:
            query: '260107-my-app' or just 'my-app' (case-insensitive).

        Returns:
            The newest matching project, or None.
        """
        return find_project(self.list_all(), query)

    def delete(self, query: str) -> bool:
        """Delete a project by name.

        Args:
            query: Project name or short name.

        Returns:
            True if the project directory was removed, False if it was not
            found or could not be removed.
        """
        project = self.find(query)
        if project is None:
            return False
        return self._remove(project)

    def cleanup(self, threshold_days: int) -> int:
        """Delete projects older than a number of days.

        Args:
            threshold_days: Projects with age_in_days strictly greater than
                this are removed. Zero or less disables cleanup.

        Returns:
            Number of project directories actually removed.
        """
        if threshold_days <= 0:
            return 0

        now = datetime.now()
        expired = [p for p in self.list_all() if p.age_at(now) > threshold_days]
        return sum(1 for project in expired if self._remove(project))

    def resolve_import_destination(
        self, short_name: str, today: date | None = None
    ) -> Path | None:
        """Get the destination path for an import without importing.

        Creates the home directory if needed, so the caller can create the
        destination and change into it before any data moves.

        Args:
            short_name: Name for the imported project.
            today: Date for the name prefix (default: today).

        Returns:
            Path of the dated destination, or None if it already exists.
        """
        self._home.mkdir(parents=True, exist_ok=True)

        destination = self._home / dated_name(short_name, today)
        if destination.exists():
            return None
        return destination

    def import_project(
        self,
        source: str | Path,
        destination: str | Path,
        mode: ImportMode = ImportMode.MOVE,
    ) -> ImportResult:
        """Import a directory into the burner home.

        Args:
            source: Directory to import.
            destination: Target directory, usually from
                resolve_import_destination() and already created.
            mode: MOVE relocates the contents and leaves an empty source
                directory behind; COPY duplicates the tree, keeping
                symlinks as links.

        Returns:
            ImportResult with the destination on success. On failure the
            partially written destination is left for the caller.
        """
        source = Path(source)
        destination = Path(destination)

        if not source.is_dir():
            logger.warning(f"Import source does not exist: {source}")
            return ImportResult(success=False)

        try:
            if mode is ImportMode.COPY:
                copy_tree(source, destination)
            else:
                move_contents(source, destination)

            # Marks the project as custom regardless of what it contains
            (destination / CUSTOM_MARKER).write_text("", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Import of {source} failed: {e}")
            return ImportResult(success=False)

        logger.info(f"Imported {source} -> {destination} ({mode.value})")
        return ImportResult(success=True, path=destination)

    def directory_size(self, project: ProjectRecord) -> int:
        """Total size in bytes of the regular files inside a project."""
        total = 0
        try:
            for path in project.path.rglob("*"):
                if path.is_file() and not path.is_symlink():
                    total += path.stat().st_size
        except OSError as e:
            logger.debug(f"Could not size {project.path}: {e}")
            return 0
        return total

    def _remove(self, project: ProjectRecord) -> bool:
        try:
            shutil.rmtree(project.path)
        except OSError as e:
            logger.warning(f"Could not delete {project.name}: {e}")
            return False
        logger.info(f"Deleted project {project.name}")
        return True
