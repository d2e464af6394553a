"""Tests for ProjectRepository over a temporary burner home."""

import os
import shutil
from datetime import date
from pathlib import Path

import pytest

from burner.domain.project import CUSTOM_MARKER, TemplateKind, models
from burner.domain.template import ImportMode
from burner.infrastructure.storage import ProjectRepository, move_contents

skip_without_symlinks = pytest.mark.skipif(
    os.name == "nt", reason="creating symlinks needs privileges on Windows"
)


class TestListing:
    def test_missing_home_lists_nothing(self, tmp_path: Path):
        assert ProjectRepository(tmp_path / "nope").list_all() == []

    def test_newest_first(self, repository, make_project):
        make_project("200105-a")
        make_project("210301-b")
        make_project("190505-c")

        assert [p.name for p in repository.list_all()] == ["210301-b", "200105-a", "190505-c"]

    def test_files_are_ignored(self, repository, home, make_project):
        make_project("200105-a")
        (home / "notes.txt").write_text("", encoding="utf-8")

        assert [p.name for p in repository.list_all()] == ["200105-a"]

    def test_names_equal_paths(self, repository, make_project):
        make_project("demo", days_old=3)

        for project in repository.list_all():
            assert project.path.name == project.name
            assert project.age_in_days == 3

    def test_unreadable_folder_is_skipped(self, repository, make_project, monkeypatch):
        good = make_project("good", days_old=40)
        make_project("undated")
        real_creation_time = models._creation_time

        def vanished(directory):
            if directory.name == "undated":
                raise FileNotFoundError(directory)
            return real_creation_time(directory)

        monkeypatch.setattr(models, "_creation_time", vanished)

        assert [p.name for p in repository.list_all()] == [good.name]
        assert repository.find("good").path == good
        assert repository.cleanup(30) == 1
        assert not good.exists()


class TestFind:
    def test_by_full_and_short_name(self, repository, make_project):
        make_project("260107-my-app")

        assert repository.find("260107-my-app").name == "260107-my-app"
        assert repository.find("MY-APP").name == "260107-my-app"
        assert repository.find("my") is None

    def test_newest_match_wins(self, repository, make_project):
        make_project("200101-demo")
        make_project("210101-demo")

        assert repository.find("demo").name == "210101-demo"


class TestDelete:
    def test_removes_directory_tree(self, repository, make_project):
        path = make_project("200101-demo", files=["a.txt"])
        (path / "sub").mkdir()

        assert repository.delete("demo") is True
        assert not path.exists()

    def test_unknown_project(self, repository):
        assert repository.delete("missing") is False

    def test_failure_is_reported(self, repository, make_project, monkeypatch):
        path = make_project("200101-demo")

        def fail(*args, **kwargs):
            raise PermissionError("locked")

        monkeypatch.setattr(shutil, "rmtree", fail)

        assert repository.delete("demo") is False
        assert path.exists()


class TestCleanup:
    def test_strictly_older_than_threshold(self, repository, make_project):
        fresh = make_project("fresh", days_old=0)
        edge = make_project("edge", days_old=30)
        old = make_project("old", days_old=31)

        assert repository.cleanup(30) == 1
        assert fresh.exists()
        assert edge.exists()
        assert not old.exists()

    @pytest.mark.parametrize("threshold", [0, -5])
    def test_disabled(self, repository, make_project, threshold):
        old = make_project("old", days_old=400)

        assert repository.cleanup(threshold) == 0
        assert old.exists()

    def test_counts_only_removed(self, repository, make_project, monkeypatch):
        make_project("a", days_old=40)
        make_project("b", days_old=50)
        real_rmtree = shutil.rmtree

        def flaky(path, *args, **kwargs):
            if Path(path).name.endswith("-b"):
                raise PermissionError("locked")
            real_rmtree(path, *args, **kwargs)

        monkeypatch.setattr(shutil, "rmtree", flaky)

        assert repository.cleanup(30) == 1


class TestImport:
    @pytest.fixture
    def source(self, tmp_path: Path) -> Path:
        source = tmp_path / "work" / "my-thing"
        (source / "src").mkdir(parents=True)
        (source / "README.md").write_text("hello", encoding="utf-8")
        (source / "src" / "main.py").write_text("print()", encoding="utf-8")
        return source

    def test_resolve_destination(self, tmp_path: Path):
        repository = ProjectRepository(tmp_path / "fresh-home")

        destination = repository.resolve_import_destination("x", date(2026, 1, 7))

        assert destination == tmp_path / "fresh-home" / "260107-x"
        assert (tmp_path / "fresh-home").is_dir()
        assert not destination.exists()

    def test_resolve_existing_destination(self, repository, make_project):
        make_project("260107-x")

        assert repository.resolve_import_destination("x", date(2026, 1, 7)) is None

    def test_move_leaves_source_empty(self, repository, home, source):
        destination = home / "260107-my-thing"

        result = repository.import_project(source, destination, ImportMode.MOVE)

        assert result.success
        assert result.path == destination
        assert source.is_dir()
        assert list(source.iterdir()) == []
        assert (destination / "README.md").read_text(encoding="utf-8") == "hello"
        assert (destination / "src" / "main.py").exists()
        assert repository.find("my-thing").template == TemplateKind.CUSTOM

    def test_copy_keeps_source(self, repository, home, source):
        destination = home / "260107-my-thing"
        destination.mkdir()

        result = repository.import_project(source, destination, ImportMode.COPY)

        assert result.success
        assert (source / "README.md").exists()
        assert (destination / "src" / "main.py").exists()
        assert (destination / CUSTOM_MARKER).exists()

    @skip_without_symlinks
    def test_copy_preserves_symlinks(self, repository, home, source):
        os.symlink("README.md", source / "link.md")
        destination = home / "260107-my-thing"

        assert repository.import_project(source, destination, ImportMode.COPY).success

        assert (destination / "link.md").is_symlink()
        assert os.readlink(destination / "link.md") == "README.md"

    def test_missing_source(self, repository, home, tmp_path):
        result = repository.import_project(tmp_path / "nope", home / "260107-x")

        assert not result.success
        assert result.path is None

    def test_move_collision_fails(self, repository, home, source):
        destination = home / "260107-my-thing"
        destination.mkdir()
        (destination / "README.md").write_text("theirs", encoding="utf-8")

        result = repository.import_project(source, destination, ImportMode.MOVE)

        assert not result.success
        assert (destination / "README.md").read_text(encoding="utf-8") == "theirs"
        assert (source / "README.md").read_text(encoding="utf-8") == "hello"


def test_move_contents_raises_on_existing_entry(tmp_path: Path):
    source = tmp_path / "a"
    destination = tmp_path / "b"
    source.mkdir()
    destination.mkdir()
    (source / "same.txt").write_text("", encoding="utf-8")
    (destination / "same.txt").write_text("", encoding="utf-8")

    with pytest.raises(FileExistsError):
        move_contents(source, destination)


def test_directory_size(repository, make_project):
    path = make_project("200101-demo")
    (path / "a.bin").write_bytes(b"x" * 100)
    (path / "sub").mkdir()
    (path / "sub" / "b.bin").write_bytes(b"x" * 24)

    assert repository.directory_size(repository.find("demo")) == 124
