"""Template catalog over the templates directory.

A template is any script in the templates directory with a recognized
extension; its identifier is the filename without extension. The built-in
templates are regenerated whenever their script is missing. Discovery is
repeated on every query so edits to the directory show up immediately.
"""

import logging
import os
from pathlib import Path

from burner.domain.template.models import (
    BUILT_IN_TEMPLATES,
    MARKER_SCAN_LINES,
    TemplateDescriptor,
    has_interactive_marker,
    is_built_in,
    is_script,
)
from burner.infrastructure.templates.builtin import builtin_extension, builtin_script

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """Discovers and resolves template scripts.

    Example:
        catalog = TemplateCatalog(Path("~/.burner/templates").expanduser())
        script = catalog.resolve("web")
        if script is not None and catalog.is_interactive("web"):
            ...
    """

    def __init__(self, templates_dir: str | Path, windows: bool | None = None) -> None:
        """Initialize the catalog and materialize missing built-ins.

        Args:
            templates_dir: Directory holding the template scripts.
            windows: Platform family for generated built-ins. Defaults to
                the host platform.
        """
        self._dir = Path(templates_dir).expanduser().absolute()
        self._windows = os.name == "nt" if windows is None else windows
        self.ensure_builtins()

    @property
    def templates_dir(self) -> Path:
        """The templates directory."""
        return self._dir

    def ensure_builtins(self) -> None:
        """Write the default script of every built-in that is missing.

        Existing scripts are never overwritten.
        """
        extension = builtin_extension(self._windows)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            for name in BUILT_IN_TEMPLATES:
                script = self._dir / f"{name}{extension}"
                if not script.exists():
                    script.write_text(
                        builtin_script(name, self._windows),
                        encoding="utf-8",
                        newline="\n",
                    )
                    logger.info(f"Created built-in template script {script}")
        except OSError as e:
            logger.warning(f"Could not create built-in templates in {self._dir}: {e}")

    def list_available(self) -> list[str]:
        """List template identifiers, built-ins included.

        Names are deduplicated case-insensitively; the first spelling seen
        wins.
        """
        self.ensure_builtins()

        names: dict[str, str] = {name: name for name in BUILT_IN_TEMPLATES}
        for script in self._scripts():
            names.setdefault(script.stem.lower(), script.stem)
        return sorted(names.values(), key=str.lower)

    def list_with_details(self) -> list[TemplateDescriptor]:
        """List template scripts with filename, built-in and interactive flags.

        When several files share a name (e.g. web.sh and web.py), only the
        first in sorted order is reported, matching resolve().
        """
        self.ensure_builtins()

        seen: set[str] = set()
        descriptors: list[TemplateDescriptor] = []
        for script in self._scripts():
            key = script.stem.lower()
            if key in seen:
                continue
            seen.add(key)
            descriptors.append(
                TemplateDescriptor(
                    name=script.stem,
                    filename=script.name,
                    script_path=script.absolute(),
                    is_built_in=is_built_in(script.stem),
                    is_interactive=self._read_marker(script),
                )
            )
        return descriptors

    def resolve(self, name: str) -> Path | None:
        """Find the script for a template name.

        Args:
            name: Template identifier (case-insensitive).

        Returns:
            Absolute path to the script, or None if there is none.
        """
        self.ensure_builtins()

        wanted = name.lower()
        for script in self._scripts():
            if script.stem.lower() == wanted:
                return script.absolute()
        return None

    def is_interactive(self, name: str) -> bool:
        """Check whether a template asks to run attached to the terminal.

        Returns:
            True if the marker token appears in the first lines of the
            script. False if it does not, if the template cannot be
            resolved, or if the script cannot be read.
        """
        script = self.resolve(name)
        if script is None:
            return False
        return self._read_marker(script)

    def _scripts(self) -> list[Path]:
        if not self._dir.is_dir():
            return []
        try:
            return sorted(
                (p for p in self._dir.iterdir() if p.is_file() and is_script(p)),
                key=lambda p: p.name.lower(),
            )
        except OSError as e:
            logger.warning(f"Could not list templates in {self._dir}: {e}")
            return []

    def _read_marker(self, script: Path) -> bool:
        lines: list[str] = []
        try:
            with script.open(encoding="utf-8", errors="replace") as f:
                for line in f:
                    lines.append(line)
                    if len(lines) >= MARKER_SCAN_LINES:
                        break
        except OSError as e:
            logger.debug(f"Could not read {script}: {e}")
            return False
        return has_interactive_marker(lines)
