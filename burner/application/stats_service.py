"""Project statistics.

Summarizes the projects in the burner home for the `stats` command.
All functions are pure - sizes are measured by the caller.
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from burner.domain.project import ProjectRecord

MONTHS_SHOWN = 6


@dataclass(frozen=True)
class AgeBuckets:
    """Project counts grouped by age."""

    fresh: int = 0  # < 7 days
    recent: int = 0  # 7-30 days
    old: int = 0  # 30-90 days
    ancient: int = 0  # >= 90 days


@dataclass(frozen=True)
class ProjectStats:
    """Aggregated statistics over a set of projects.

    Attributes:
        total: Number of projects.
        total_bytes: Combined size of all project files.
        average_age: Mean age in days (0.0 with no projects).
        due_for_cleanup: Projects older than the auto-clean threshold,
            0 when auto-clean is disabled.
        by_template: (template, count) pairs, most common first.
        by_age: Counts per age bucket.
        by_month: ((year, month), count) pairs for the most recent
            months with projects, oldest first.
    """

    total: int
    total_bytes: int
    average_age: float
    due_for_cleanup: int
    by_template: list[tuple[str, int]] = field(default_factory=list)
    by_age: AgeBuckets = field(default_factory=AgeBuckets)
    by_month: list[tuple[tuple[int, int], int]] = field(default_factory=list)


def compute_stats(
    records: Sequence[ProjectRecord],
    auto_clean_days: int,
    sizes: Mapping[Path, int] | None = None,
    now: datetime | None = None,
) -> ProjectStats:
    """Compute statistics over project records.

    Args:
        records: Projects to summarize.
        auto_clean_days: Cleanup threshold; zero or less means disabled.
        sizes: Size in bytes per project path. Missing paths count as 0.
        now: Reference time for ages (default: now).

    Returns:
        ProjectStats for the given records.
    """
    now = now or datetime.now()
    sizes = sizes or {}
    ages = [r.age_at(now) for r in records]

    due = 0
    if auto_clean_days > 0:
        due = sum(1 for age in ages if age > auto_clean_days)

    by_template = Counter(r.template for r in records).most_common()
    by_month = sorted(Counter((r.created_at.year, r.created_at.month) for r in records).items())

    return ProjectStats(
        total=len(records),
        total_bytes=sum(sizes.get(r.path, 0) for r in records),
        average_age=sum(ages) / len(ages) if ages else 0.0,
        due_for_cleanup=due,
        by_template=by_template,
        by_age=AgeBuckets(
            fresh=sum(1 for a in ages if a < 7),
            recent=sum(1 for a in ages if 7 <= a < 30),
            old=sum(1 for a in ages if 30 <= a < 90),
            ancient=sum(1 for a in ages if a >= 90),
        ),
        by_month=by_month[-MONTHS_SHOWN:],
    )


def format_size(num_bytes: int) -> str:
    """Format a byte count, e.g. 1536 -> '1.5 KB'."""
    units = ["B", "KB", "MB", "GB"]
    size = float(num_bytes)
    order = 0
    while size >= 1024 and order < len(units) - 1:
        order += 1
        size /= 1024
    return f"{size:.1f} {units[order]}"
