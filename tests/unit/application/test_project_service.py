"""Tests for creating projects from templates."""

from datetime import date
from pathlib import Path

import pytest

from burner.application import ProjectCreator, validate_short_name
from burner.domain.shared import Err, Ok, is_err, is_ok
from burner.domain.template import ExecutionMode, TemplateEnvironment

TODAY = date(2026, 1, 7)


class RecordingRunner:
    """Runner double that records calls instead of starting processes."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[tuple[Path, TemplateEnvironment, ExecutionMode]] = []

    def run(self, script_path, env, mode=ExecutionMode.CAPTURED) -> int:
        self.calls.append((script_path, env, mode))
        return self.exit_code


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def creator(repository, catalog, runner) -> ProjectCreator:
    return ProjectCreator(repository, catalog, runner)


class TestValidateShortName:
    def test_strips_whitespace(self):
        assert validate_short_name("  demo ") == Ok("demo")

    @pytest.mark.parametrize("name", ["", "   ", ".", ".."])
    def test_rejects_empty_and_dot_names(self, name):
        assert is_err(validate_short_name(name))

    @pytest.mark.parametrize("name", ["a/b", "a\\b", "a:b", "a*b", "a?b", 'a"b', "a|b"])
    def test_rejects_path_characters(self, name):
        result = validate_short_name(name)

        assert isinstance(result, Err)
        assert "invalid characters" in result.error


class TestCreate:
    def test_runs_template_in_new_directory(self, creator, runner, home, catalog):
        result = creator.create("web", "quick-test", today=TODAY)

        assert isinstance(result, Ok)
        project = home / "260107-quick-test"
        assert project.is_dir()
        assert result.value.path == project.absolute()
        assert result.value.dated_name == "260107-quick-test"

        script, env, mode = runner.calls[0]
        assert script == catalog.resolve("web")
        assert env.name == "quick-test"
        assert env.path == project.absolute()
        assert mode is ExecutionMode.CAPTURED

    def test_existing_destination_is_untouched(self, creator, runner, home):
        existing = home / "260107-demo"
        existing.mkdir()
        (existing / "keep.txt").write_text("mine", encoding="utf-8")

        result = creator.create("web", "demo", today=TODAY)

        assert isinstance(result, Err)
        assert "already exists" in result.error
        assert runner.calls == []
        assert [p.name for p in existing.iterdir()] == ["keep.txt"]

    def test_unknown_template(self, creator, runner, home):
        result = creator.create("nope", "demo", today=TODAY)

        assert isinstance(result, Err)
        assert "Template not found" in result.error
        assert not (home / "260107-demo").exists()
        assert runner.calls == []

    def test_invalid_name(self, creator, runner):
        assert is_err(creator.create("web", "a/b", today=TODAY))
        assert runner.calls == []

    def test_failing_script(self, repository, catalog, home):
        creator = ProjectCreator(repository, catalog, RecordingRunner(exit_code=2))

        result = creator.create("web", "demo", today=TODAY)

        assert isinstance(result, Err)
        assert "exit code 2" in result.error
        assert (home / "260107-demo").is_dir()

    def test_target_directory(self, creator, tmp_path):
        target = tmp_path / "elsewhere" / "nested"

        result = creator.create("web", "demo", target_dir=target, today=TODAY)

        assert is_ok(result)
        assert (target / "260107-demo").is_dir()

    def test_interactive_flag(self, creator, runner):
        creator.create("web", "demo", interactive=True, today=TODAY)

        assert runner.calls[0][2] is ExecutionMode.INHERITED

    def test_interactive_marker(self, creator, runner, write_template):
        write_template("wizard", "# burner:interactive\n")

        creator.create("wizard", "demo", today=TODAY)

        assert runner.calls[0][2] is ExecutionMode.INHERITED


def test_create_with_real_script(repository, catalog, write_template, home):
    write_template(
        "hello",
        "import os, pathlib\n"
        "pathlib.Path('hello.txt').write_text(os.environ['BURNER_NAME'])\n",
    )

    result = ProjectCreator(repository, catalog).create("hello", "demo", today=TODAY)

    assert is_ok(result)
    assert (home / "260107-demo" / "hello.txt").read_text() == "demo"
