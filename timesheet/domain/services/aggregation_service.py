"""Entry aggregation service.

Turns a flat collection of entries into week buckets, groups each bucket by a
secondary dimension and date, sums the hours and applies the canonical order:
weeks newest first, rows oldest first inside a week.
"""

import logging
from collections import defaultdict
from datetime import date
from operator import attrgetter
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from timesheet.domain.models.base import ValidationError
from timesheet.domain.models.entry import Entry, Hours
from timesheet.domain.services.day_conversion import add_hours
from timesheet.domain.services.week_service import week_start

logger = logging.getLogger(__name__)


Dimension = Callable[[Entry], Any]

by_person: Dimension = attrgetter("person")
by_project: Dimension = attrgetter("project")


class WeekRow(NamedTuple):
    """Summed hours for one dimension value on one day."""

    date: date
    dimension: Any
    hours: Hours


class WeekReport(NamedTuple):
    """Rows of a single week."""

    week_start: date
    rows: List[WeekRow]


class WeekEntries(NamedTuple):
    """Unsummed entries of a single week, for the index listing."""

    week_start: date
    entries: List[Entry]


def bucket_by_week(entries: Iterable[Entry]) -> Dict[date, List[Entry]]:
    """Partition entries by the Monday of their week, keeping input order."""
    buckets: Dict[date, List[Entry]] = defaultdict(list)
    for entry in entries:
        buckets[week_start(entry.date)].append(entry)
    return dict(buckets)


def group_by_dimension(
    entries: Iterable[Entry],
    dimension: Dimension
) -> Dict[Tuple[Any, date], List[Hours]]:
    """Collect the hours of each ``(dimension value, date)`` pair."""
    groups: Dict[Tuple[Any, date], List[Hours]] = defaultdict(list)
    for entry in entries:
        groups[(dimension(entry), entry.date)].append(entry.hours)
    return dict(groups)


def sum_hours(hours: Iterable[Hours]) -> Hours:
    """Exact sum of hour values; negative values are rejected."""
    total: Hours = 0
    for value in hours:
        if value < 0:
            raise ValidationError(f"Entry hours cannot be negative: {value}", "hours")
        total = add_hours(total, value)
    return total


def _row_sort_key(row: WeekRow):
    # Same-day rows fall back to the dimension's name and slug.
    return (
        row.date,
        getattr(row.dimension, "name", ""),
        getattr(row.dimension, "slug", ""),
    )


def shape_rows(groups: Dict[Tuple[Any, date], List[Hours]]) -> List[WeekRow]:
    """Sum each group into a row and order rows by date ascending."""
    rows = [
        WeekRow(day, value, sum_hours(hours))
        for (value, day), hours in groups.items()
    ]
    rows.sort(key=_row_sort_key)
    return rows


class EntryAggregator:
    """
    Week-bucketed grouping engine behind every weekly report.
    Stateless: each call recomputes from the entries it is given.
    """

    def aggregate(self, entries: Iterable[Entry], dimension: Optional[Dimension]) -> List[Any]:
        """
        Aggregate entries by week and ``dimension``.

        With a dimension selector the result is a list of :class:`WeekReport`
        whose rows hold summed hours per ``(date, dimension value)``. With
        ``None`` the result is the flat index view from :meth:`index`.
        """
        if dimension is None:
            return self.index(entries)

        buckets = bucket_by_week(entries)
        reports = [
            WeekReport(start, shape_rows(group_by_dimension(week_entries, dimension)))
            for start, week_entries in buckets.items()
        ]
        reports.sort(key=attrgetter("week_start"), reverse=True)
        logger.debug("Aggregated %d week(s)", len(reports))
        return reports

    def index(self, entries: Iterable[Entry]) -> List[WeekEntries]:
        """Group entries by week only, newest week first."""
        buckets = bucket_by_week(entries)
        weeks = [WeekEntries(start, week_entries) for start, week_entries in buckets.items()]
        weeks.sort(key=attrgetter("week_start"), reverse=True)
        return weeks
