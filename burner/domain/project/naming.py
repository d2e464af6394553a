"""Dated project names and name matching.

A burner project is identified by its directory name, conventionally
``YYMMDD-<shortname>``. These helpers build and parse that convention and
match user queries against it. They are pure functions over names and
already-scanned records; nothing here touches the filesystem.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burner.domain.project.models import ProjectRecord

DATE_FORMAT = "%y%m%d"
DATE_PREFIX_LENGTH = 6
# Two-digit years above this map to the previous century (50 -> 1950)
TWO_DIGIT_YEAR_MAX = 2049


def dated_name(short_name: str, today: date | None = None) -> str:
    """Build the dated directory name for a project.

    Args:
        short_name: Freeform project name, e.g. 'my-app'.
        today: Date to stamp the name with (default: today).

    Returns:
        Name like '260107-my-app'.
    """
    stamp = (today or date.today()).strftime(DATE_FORMAT)
    return f"{stamp}-{short_name}"


def parse_name_date(name: str) -> datetime | None:
    """Parse the creation date encoded in a dated project name.

    The name must be at least six characters long, contain a '-', and its
    first six characters must form a valid calendar date in YYMMDD form.
    Two-digit years 00-49 are read as 2000-2049 and 50-99 as 1950-1999.

    Args:
        name: Directory base name.

    Returns:
        The encoded date at midnight, or None if the name carries no
        valid date.
    """
    if len(name) < DATE_PREFIX_LENGTH or "-" not in name:
        return None

    date_part = name[:DATE_PREFIX_LENGTH]
    # strptime accepts single-digit fields, so insist on six digits first
    if not date_part.isdigit():
        return None

    try:
        parsed = datetime.strptime(date_part, DATE_FORMAT)
    except ValueError:
        return None

    # strptime puts 50-68 in 2050-2068
    if parsed.year > TWO_DIGIT_YEAR_MAX:
        parsed = parsed.replace(year=parsed.year - 100)
    return parsed


def matches_query(name: str, query: str) -> bool:
    """Check whether a project name matches a user query.

    Matching is case-insensitive: either the full name equals the query,
    or the name ends with '-<query>' so 'my-app' finds '260107-my-app'.
    """
    name = name.lower()
    query = query.lower()
    return name == query or name.endswith(f"-{query}")


def find_project(
    records: Iterable["ProjectRecord"], query: str
) -> "ProjectRecord | None":
    """Return the first record whose name matches the query.

    Records are expected in listing order (newest first), so the newest
    match wins.
    """
    for record in records:
        if matches_query(record.name, query):
            return record
    return None


def find_similar(
    records: Iterable["ProjectRecord"], query: str, limit: int = 3
) -> list["ProjectRecord"]:
    """Return up to `limit` records whose name contains the query."""
    query = query.lower()
    return [r for r in records if query in r.name.lower()][:limit]


def sort_newest_first(records: Sequence["ProjectRecord"]) -> list["ProjectRecord"]:
    """Order records by creation date, newest first.

    The sort is stable, so records created at the same moment keep the
    order in which the directory scan produced them.
    """
    return sorted(records, key=lambda r: r.created_at, reverse=True)
