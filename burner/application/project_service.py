"""Project creation service.

Creates dated project directories by running a template script inside
them. Combines the template catalog (which script, interactive or not)
with the template runner (how it runs).
"""

import logging
from datetime import date
from pathlib import Path

from burner.domain.project import ProjectCreated, dated_name
from burner.domain.shared import Err, Ok, Result
from burner.domain.template import ExecutionMode, TemplateEnvironment
from burner.infrastructure.process import TemplateRunner
from burner.infrastructure.storage import ProjectRepository
from burner.infrastructure.templates import TemplateCatalog

logger = logging.getLogger(__name__)

# Characters no project name may contain, on any platform
INVALID_NAME_CHARS = set('<>:"/\\|?*\0')


def validate_short_name(name: str) -> Result[str, str]:
    """Validate a short project name.

    Args:
        name: Name the user gave, e.g. 'my-app'.

    Returns:
        Ok(name) stripped of surrounding whitespace, or Err(str) with the
        reason it cannot be used as a directory name.
    """
    name = name.strip()

    if not name:
        return Err("Project name cannot be empty")

    if name in (".", ".."):
        return Err(f"Invalid project name: {name}")

    invalid = sorted(INVALID_NAME_CHARS.intersection(name))
    if invalid:
        shown = " ".join("\\0" if c == "\0" else c for c in invalid)
        return Err(f"Project name contains invalid characters: {shown}")

    return Ok(name)


class ProjectCreator:
    """Creates burner projects from templates.

    Example:
        creator = ProjectCreator(repository, catalog, TemplateRunner())
        result = creator.create("web", "quick-test")
        if isinstance(result, Ok):
            print(result.value.path)
    """

    def __init__(
        self,
        repository: ProjectRepository,
        catalog: TemplateCatalog,
        runner: TemplateRunner | None = None,
    ) -> None:
        """Initialize the creator.

        Args:
            repository: Supplies the default target (the burner home).
            catalog: Resolves template names to scripts.
            runner: Runs the scripts. Creates a new one if not provided.
        """
        self._repository = repository
        self._catalog = catalog
        self._runner = runner or TemplateRunner()

    def destination_for(
        self,
        short_name: str,
        target_dir: str | Path | None = None,
        today: date | None = None,
    ) -> Path:
        """Path a project with this name would be created at."""
        parent = Path(target_dir) if target_dir else self._repository.home
        return parent / dated_name(short_name, today)

    def create(
        self,
        template: str,
        short_name: str,
        target_dir: str | Path | None = None,
        interactive: bool = False,
        today: date | None = None,
    ) -> Result[ProjectCreated, str]:
        """Create a dated project directory and scaffold it from a template.

        The destination is never overwritten. A script that fails leaves
        its partial output behind; cleaning up is up to the caller.

        Args:
            template: Template identifier, e.g. 'web'.
            short_name: Short project name, e.g. 'quick-test'.
            target_dir: Parent directory (default: the burner home).
            interactive: Attach the script to the terminal. Templates that
                declare the interactive marker are attached regardless.
            today: Date for the name prefix (default: today).

        Returns:
            Ok(ProjectCreated) if the script exited with code 0, or
            Err(str) explaining why nothing or not everything was created.
        """
        name_result = validate_short_name(short_name)
        if isinstance(name_result, Err):
            return name_result
        short_name = name_result.value

        project_path = self.destination_for(short_name, target_dir, today)

        try:
            project_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(f"Cannot create directory {project_path.parent}: {e}")

        if project_path.exists():
            return Err(f"Project already exists: {project_path}")

        script = self._catalog.resolve(template)
        if script is None:
            return Err(f"Template not found: {template}")

        try:
            project_path.mkdir()
        except OSError as e:
            return Err(f"Cannot create project directory {project_path}: {e}")

        mode = (
            ExecutionMode.INHERITED
            if interactive or self._catalog.is_interactive(template)
            else ExecutionMode.CAPTURED
        )
        env = TemplateEnvironment(
            name=short_name,
            path=project_path.absolute(),
            dated_name=project_path.name,
        )

        logger.info(f"Creating {project_path} from template '{template}'")
        exit_code = self._runner.run(script, env, mode)
        if exit_code != 0:
            return Err(f"Template '{template}' failed with exit code {exit_code}")

        return Ok(
            ProjectCreated(
                template=template,
                name=short_name,
                dated_name=env.dated_name,
                path=env.path,
            )
        )
