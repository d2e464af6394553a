"""Open project directories in an editor or the platform file browser."""

import logging
import shlex
import shutil
import subprocess
from pathlib import Path

import typer

logger = logging.getLogger(__name__)


def open_in_editor(path: Path, editor: str) -> bool:
    """Start the editor on a directory without waiting for it.

    Args:
        path: Directory to open.
        editor: Editor command, possibly with arguments (e.g. 'code -n').

    Returns:
        True if the editor was started.
    """
    parts = shlex.split(editor)
    if not parts:
        return False

    # Resolves .cmd/.bat shims such as code.cmd on Windows
    executable = shutil.which(parts[0])
    if executable is None:
        logger.warning(f"Editor not found in PATH: {parts[0]}")
        return False

    try:
        subprocess.Popen([executable, *parts[1:], str(path)])
    except OSError as e:
        logger.warning(f"Could not start {editor}: {e}")
        return False
    return True


def open_in_file_browser(path: Path) -> bool:
    """Open a directory in the platform file browser.

    Returns:
        True if the file browser was launched.
    """
    return typer.launch(str(path)) == 0
