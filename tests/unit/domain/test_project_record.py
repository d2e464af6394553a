"""Tests for ProjectRecord built from directories."""

from datetime import datetime, timedelta
from pathlib import Path

from burner.domain.project import CUSTOM_MARKER, ProjectRecord, TemplateKind


class TestFromDirectory:
    def test_missing_directory(self, tmp_path: Path):
        assert ProjectRecord.from_directory(tmp_path / "nope") is None

    def test_file_is_not_a_project(self, tmp_path: Path):
        file = tmp_path / "260107-file"
        file.write_text("", encoding="utf-8")

        assert ProjectRecord.from_directory(file) is None

    def test_date_from_name(self, tmp_path: Path):
        folder = tmp_path / "260107-demo"
        folder.mkdir()

        record = ProjectRecord.from_directory(folder)

        assert record is not None
        assert record.name == "260107-demo"
        assert record.path == folder.absolute()
        assert record.created_at == datetime(2026, 1, 7)

    def test_undated_name_uses_filesystem_time(self, tmp_path: Path):
        folder = tmp_path / "scratch"
        folder.mkdir()

        record = ProjectRecord.from_directory(folder)

        assert record is not None
        assert abs(datetime.now() - record.created_at) < timedelta(minutes=5)
        assert record.age_in_days == 0

    def test_invalid_date_falls_back_to_filesystem_time(self, tmp_path: Path):
        folder = tmp_path / "999999-demo"
        folder.mkdir()

        record = ProjectRecord.from_directory(folder)

        assert record is not None
        assert record.created_at.date() == datetime.now().date()


class TestTemplateDetection:
    def _detect(self, tmp_path: Path, *files: str) -> str:
        folder = tmp_path / "260107-demo"
        folder.mkdir()
        for name in files:
            (folder / name).write_text("", encoding="utf-8")
        record = ProjectRecord.from_directory(folder)
        assert record is not None
        return record.template

    def test_unknown(self, tmp_path: Path):
        assert self._detect(tmp_path, "notes.txt") == TemplateKind.UNKNOWN

    def test_dotnet(self, tmp_path: Path):
        assert self._detect(tmp_path, "demo.csproj") == TemplateKind.DOTNET

    def test_web(self, tmp_path: Path):
        assert self._detect(tmp_path, "index.html") == TemplateKind.WEB

    def test_dotnet_wins_over_web(self, tmp_path: Path):
        assert self._detect(tmp_path, "index.html", "demo.csproj") == TemplateKind.DOTNET

    def test_custom_marker_wins(self, tmp_path: Path):
        assert (
            self._detect(tmp_path, CUSTOM_MARKER, "demo.csproj", "index.html")
            == TemplateKind.CUSTOM
        )

    def test_only_top_level_is_inspected(self, tmp_path: Path):
        folder = tmp_path / "260107-demo"
        (folder / "src").mkdir(parents=True)
        (folder / "src" / "index.html").write_text("", encoding="utf-8")

        record = ProjectRecord.from_directory(folder)

        assert record is not None
        assert record.template == TemplateKind.UNKNOWN


def test_age_at_counts_whole_days():
    record = ProjectRecord(
        name="260101-demo", path=Path("/p/260101-demo"), created_at=datetime(2026, 1, 1)
    )

    assert record.age_at(datetime(2026, 1, 1, 23, 59)) == 0
    assert record.age_at(datetime(2026, 1, 31, 12, 0)) == 30
    assert record.age_at(datetime(2026, 2, 1)) == 31
