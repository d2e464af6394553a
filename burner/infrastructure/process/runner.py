"""Template script execution.

Runs a template script as a child process inside the new project
directory. The runner only looks at the exit code; whatever the script
prints is never parsed.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

from burner.domain.template.models import ExecutionMode, TemplateEnvironment

logger = logging.getLogger(__name__)

# Reported when the script could not be started at all
EXIT_NOT_STARTED = 127


def build_command(script_path: Path) -> list[str]:
    """Build the command line that runs a script.

    Script types that are not directly executable go through their
    interpreter; anything else is executed as-is.
    """
    script = str(script_path)
    extension = script_path.suffix.lower()

    if extension in (".sh", ".bash"):
        return ["bash", script]
    if extension == ".py":
        return [sys.executable, script]
    if extension == ".ps1":
        return ["pwsh", "-NoProfile", "-File", script]
    if extension in (".bat", ".cmd"):
        return ["cmd", "/c", script]
    return [script]


class TemplateRunner:
    """Runs template scripts with the Burner environment contract.

    Example:
        runner = TemplateRunner()
        env = TemplateEnvironment(name="demo", path=project_dir,
                                  dated_name="260107-demo")
        if runner.run(script, env, ExecutionMode.CAPTURED) == 0:
            print("scaffolded")
    """

    def run(
        self,
        script_path: Path,
        env: TemplateEnvironment,
        mode: ExecutionMode = ExecutionMode.CAPTURED,
    ) -> int:
        """Run a template script and wait for it to finish.

        There is no timeout: a script that never exits blocks the caller.

        Args:
            script_path: Script to run.
            env: Project name, path and dated name exported to the script.
            mode: CAPTURED redirects the standard streams; INHERITED
                attaches them to the current terminal so the script can
                prompt the user.

        Returns:
            The script's exit code, or EXIT_NOT_STARTED if it could not
            be launched.
        """
        command = build_command(script_path)
        child_env = {**os.environ, **env.as_env()}

        logger.debug(f"Running {command} in {env.path} ({mode.value})")
        try:
            if mode is ExecutionMode.INHERITED:
                result = subprocess.run(command, cwd=str(env.path), env=child_env)
            else:
                result = subprocess.run(
                    command,
                    cwd=str(env.path),
                    env=child_env,
                    stdin=subprocess.DEVNULL,
                    capture_output=True,
                    text=True,
                    errors="replace",
                )
        except OSError as e:
            logger.error(f"Could not start template script {script_path}: {e}")
            return EXIT_NOT_STARTED

        if result.returncode != 0:
            logger.warning(f"Template script {script_path.name} exited with {result.returncode}")
            if mode is ExecutionMode.CAPTURED and result.stderr:
                logger.debug(result.stderr.strip())

        return result.returncode
