"""Project domain models.

A burner project has no separate persisted record: the directory itself
is the record. ProjectRecord is built on demand from a directory by
reading its name and a little metadata, and is never cached.
"""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from burner.domain.project.naming import parse_name_date

CUSTOM_MARKER = ".burner-custom"


class TemplateKind:
    """Template classifications detected from project contents."""

    CUSTOM = "custom"
    DOTNET = "dotnet"
    WEB = "web"
    UNKNOWN = "unknown"


class ProjectRecord(BaseModel):
    """A burner project directory.

    Built from a directory scan. The name is always the last segment of
    the path; the creation date is derived from the name when it follows
    the YYMMDD-<name> convention, and from the filesystem otherwise.
    """

    name: str = Field(description="Directory base name, e.g. '260107-my-app'")
    path: Path = Field(description="Absolute path to the project directory")
    created_at: datetime
    template: str = TemplateKind.UNKNOWN

    model_config = {"frozen": True}

    @classmethod
    def from_directory(cls, path: str | Path) -> "ProjectRecord | None":
        """Create a record from a project directory.

        Args:
            path: Directory to read.

        Returns:
            The record, or None if the path is not an existing directory.
        """
        directory = Path(path).absolute()
        if not directory.is_dir():
            return None

        name = directory.name
        created_at = parse_name_date(name) or _creation_time(directory)

        return cls(
            name=name,
            path=directory,
            created_at=created_at,
            template=detect_template(directory),
        )

    @property
    def age_in_days(self) -> int:
        """Whole days since the project was created, recomputed on every read."""
        return self.age_at(datetime.now())

    def age_at(self, now: datetime) -> int:
        """Whole days between creation and `now`."""
        return (now - self.created_at).days


def detect_template(directory: Path) -> str:
    """Classify a project directory by its top-level contents.

    The custom marker wins over everything else, then a .csproj file,
    then an index.html.
    """
    if (directory / CUSTOM_MARKER).exists():
        return TemplateKind.CUSTOM
    if any(directory.glob("*.csproj")):
        return TemplateKind.DOTNET
    if (directory / "index.html").exists():
        return TemplateKind.WEB
    return TemplateKind.UNKNOWN


def _creation_time(directory: Path) -> datetime:
    stat = directory.stat()
    # st_birthtime only exists on some platforms (macOS, BSD, Windows)
    timestamp = getattr(stat, "st_birthtime", None) or stat.st_ctime
    return datetime.fromtimestamp(timestamp)
