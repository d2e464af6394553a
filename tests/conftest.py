"""Shared fixtures for Burner tests."""

from collections.abc import Callable, Iterable
from datetime import date, timedelta
from pathlib import Path

import pytest

from burner.domain.project import dated_name
from burner.infrastructure.storage import ProjectRepository
from burner.infrastructure.templates import TemplateCatalog


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Burner home directory (created)."""
    path = tmp_path / "projects"
    path.mkdir()
    return path


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Templates directory (not created; the catalog creates it)."""
    return tmp_path / "templates"


@pytest.fixture
def repository(home: Path) -> ProjectRepository:
    return ProjectRepository(home)


@pytest.fixture
def catalog(templates_dir: Path) -> TemplateCatalog:
    return TemplateCatalog(templates_dir, windows=False)


@pytest.fixture
def make_project(home: Path) -> Callable[..., Path]:
    """Create a project folder in the burner home.

    Call with a full name, or with days_old to get a dated name.
    """

    def _make(
        name: str,
        days_old: int | None = None,
        files: Iterable[str] = (),
    ) -> Path:
        if days_old is not None:
            name = dated_name(name, date.today() - timedelta(days=days_old))
        path = home / name
        path.mkdir()
        for filename in files:
            (path / filename).write_text("", encoding="utf-8")
        return path

    return _make


@pytest.fixture
def write_template(templates_dir: Path) -> Callable[[str, str], Path]:
    """Write a Python template script into the templates directory."""

    def _write(name: str, body: str) -> Path:
        templates_dir.mkdir(parents=True, exist_ok=True)
        script = templates_dir / f"{name}.py"
        script.write_text(body, encoding="utf-8")
        return script

    return _write


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user home (and so ~/.burner) at a temporary directory."""
    user_home = tmp_path / "user"
    user_home.mkdir()
    monkeypatch.setenv("HOME", str(user_home))
    monkeypatch.setenv("USERPROFILE", str(user_home))
    return user_home
