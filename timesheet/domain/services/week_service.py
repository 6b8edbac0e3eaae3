"""Week service for Monday-start week windows.
Computes the week containing a date and the recent weeks offered in pickers.
"""

from typing import Iterable, Iterator, List, NamedTuple, Optional, Union
from datetime import date, datetime, timedelta

from timesheet.domain.models.base import ValidationError
from timesheet.domain.models.entry import Entry


DAYS_IN_WEEK = 7


class WeekWindow(NamedTuple):
    """Inclusive Monday..Sunday range."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= _as_date(day) <= self.end


class WeekOption(NamedTuple):
    """A week start paired with its display label."""

    week_start: date
    label: str

    @property
    def value(self) -> str:
        """ISO form used as the option value."""
        return self.week_start.isoformat()


def _as_date(day: Union[date, datetime]) -> date:
    if isinstance(day, datetime):
        return day.date()
    return day


def week_window(day: Union[date, datetime]) -> WeekWindow:
    """
    Return the week window containing ``day``.

    The window starts on the Monday on or before ``day`` and ends six days
    later on Sunday; both ends belong to the week.
    """
    day = _as_date(day)
    start = day - timedelta(days=day.weekday())
    return WeekWindow(start, start + timedelta(days=DAYS_IN_WEEK - 1))


def week_start(day: Union[date, datetime]) -> date:
    """Shortcut for ``week_window(day).start``."""
    return week_window(day).start


def week_label(day: date) -> str:
    """Format a date as e.g. ``Monday 12 October 2026``."""
    return f"{day:%A} {day.day} {day:%B} {day.year}"


def recent_weeks(count: int = 3, reference_date: Optional[date] = None) -> Iterator[WeekOption]:
    """
    Yield ``count`` week options, newest first.

    The first option is the week containing ``reference_date`` (today when
    omitted); each following option is one week earlier. The generator is
    lazy; calling again with the same reference date yields the same weeks.
    """
    if count < 0:
        raise ValidationError("Week count cannot be negative", "count")

    current = week_start(reference_date or date.today())
    for offset in range(count):
        start = current - timedelta(weeks=offset)
        yield WeekOption(start, week_label(start))


def entries_for_week(entries: Iterable[Entry], day: Union[date, datetime]) -> List[Entry]:
    """Return the entries whose date falls in the week containing ``day``."""
    window = week_window(day)
    return [entry for entry in entries if window.contains(entry.date)]
