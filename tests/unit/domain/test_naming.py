"""Tests for dated project names and query matching."""

from datetime import date, datetime
from pathlib import Path

import pytest

from burner.domain.project import (
    ProjectRecord,
    dated_name,
    find_project,
    find_similar,
    matches_query,
    parse_name_date,
    sort_newest_first,
)


def _record(name: str, created_at: datetime) -> ProjectRecord:
    return ProjectRecord(name=name, path=Path("/projects") / name, created_at=created_at)


class TestDatedName:
    def test_prefixes_short_name_with_date(self):
        assert dated_name("my-app", date(2026, 1, 7)) == "260107-my-app"

    def test_defaults_to_today(self):
        assert dated_name("x") == f"{date.today():%y%m%d}-x"


class TestParseNameDate:
    def test_valid_prefix(self):
        assert parse_name_date("260107-my-app") == datetime(2026, 1, 7)

    @pytest.mark.parametrize(
        "name",
        [
            "my-app",  # no date
            "260107",  # no dash
            "26017-x",  # too few digits
            "261307-x",  # month 13
            "260230-x",  # February 30th
            "2601a7-x",
            "",
        ],
    )
    def test_invalid_prefix(self, name):
        assert parse_name_date(name) is None

    def test_dash_may_appear_anywhere(self):
        assert parse_name_date("260107xyz-a") == datetime(2026, 1, 7)


class TestMatching:
    def test_exact_name(self):
        assert matches_query("260107-my-app", "260107-my-app")

    def test_short_name_suffix(self):
        assert matches_query("260107-my-app", "my-app")
        assert matches_query("260107-my-app", "app")

    def test_case_insensitive(self):
        assert matches_query("260107-My-App", "MY-APP")

    def test_substring_is_not_a_match(self):
        assert not matches_query("260107-my-app", "my")
        assert not matches_query("260107-my-app", "260107")

    def test_find_returns_first_match_in_order(self):
        newer = _record("260301-demo", datetime(2026, 3, 1))
        older = _record("260101-demo", datetime(2026, 1, 1))

        assert find_project([newer, older], "demo") is newer
        assert find_project([newer, older], "missing") is None

    def test_find_similar_limits_results(self):
        records = [_record(f"26010{i}-demo{i}", datetime(2026, 1, i)) for i in range(1, 6)]

        similar = find_similar(records, "DEMO")

        assert [r.name for r in similar] == ["260101-demo1", "260102-demo2", "260103-demo3"]


def test_sort_newest_first_is_stable():
    a = _record("a", datetime(2026, 1, 1))
    b = _record("b", datetime(2026, 2, 1))
    c = _record("c", datetime(2026, 1, 1))

    assert [r.name for r in sort_newest_first([a, b, c])] == ["b", "a", "c"]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("000101-x", datetime(2000, 1, 1)),
        ("491231-x", datetime(2049, 12, 31)),
        ("500101-x", datetime(1950, 1, 1)),
        ("680229-x", datetime(1968, 2, 29)),
        ("990101-x", datetime(1999, 1, 1)),
    ],
)
def test_two_digit_year_cutoff(name, expected):
    assert parse_name_date(name) == expected
