"""Template domain models.

Value objects describing template scripts and the contract under which
they run. A template script is an arbitrary user-supplied program; the
only things Burner promises it are the working directory and the three
environment variables produced by TemplateEnvironment.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel

BUILT_IN_TEMPLATES = ("dotnet", "web")

# Token a script puts in its first lines to ask for the terminal
INTERACTIVE_MARKER = "burner:interactive"
MARKER_SCAN_LINES = 10

SCRIPT_EXTENSIONS = (".sh", ".bash", ".py", ".ps1", ".bat", ".cmd", ".exe")


class ExecutionMode(str, Enum):
    """How a template script's standard streams are wired."""

    CAPTURED = "captured"  # redirected, output kept by Burner
    INHERITED = "inherited"  # attached to the user's terminal


class ImportMode(str, Enum):
    """How an existing folder is brought into the burner home."""

    MOVE = "move"
    COPY = "copy"


@dataclass(frozen=True)
class TemplateEnvironment:
    """Inputs handed to a template script.

    Attributes:
        name: Short project name, e.g. 'my-app'.
        path: Absolute path of the project directory being created.
        dated_name: Directory name, e.g. '260107-my-app'.
    """

    name: str
    path: Path
    dated_name: str

    def as_env(self) -> dict[str, str]:
        """Return the environment variables visible to the script."""
        return {
            "BURNER_NAME": self.name,
            "BURNER_PATH": str(self.path),
            "BURNER_DATED_NAME": self.dated_name,
        }


class TemplateDescriptor(BaseModel):
    """A template script discovered in the templates directory."""

    name: str
    filename: str
    script_path: Path
    is_built_in: bool = False
    is_interactive: bool = False


def is_built_in(name: str) -> bool:
    """Check whether a template name is one of the reserved built-ins."""
    return name.lower() in BUILT_IN_TEMPLATES


def is_script(path: Path) -> bool:
    """Check whether a file has a recognized template script extension."""
    return path.suffix.lower() in SCRIPT_EXTENSIONS


def has_interactive_marker(lines: list[str]) -> bool:
    """Check the leading lines of a script for the interactive marker."""
    marker = INTERACTIVE_MARKER.lower()
    return any(marker in line.lower() for line in lines[:MARKER_SCAN_LINES])
