"""Hours to days conversion.

All day-equivalent figures in reports come from :func:`hours_to_days`, so
there is exactly one rounding policy: sum the hours first, then round the
total up to the nearest ``1/granularity`` of a day.
"""

import math
from decimal import Decimal
from typing import Iterable

from timesheet.domain.models.base import PreconditionViolation
from timesheet.domain.models.entry import Hours


DEFAULT_HOURS_PER_DAY = 8
DEFAULT_GRANULARITY = 4


def to_decimal(value: Hours) -> Decimal:
    """Exact decimal form of an hour value; floats go through their repr."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def add_hours(total: Hours, value: Hours) -> Hours:
    """Add two hour values, promoting to Decimal when either side is one."""
    if isinstance(total, Decimal) or isinstance(value, Decimal):
        return to_decimal(total) + to_decimal(value)
    return total + value


def hours_to_days(
    total_hours: Hours,
    hours_per_day: Hours = DEFAULT_HOURS_PER_DAY,
    granularity: int = DEFAULT_GRANULARITY
) -> float:
    """
    Convert a summed hour total into days, rounding up.

    With the defaults, 32h is 4.0 days, 33h is 4.25 days and 25h is 3.25 days.
    """
    if hours_per_day <= 0:
        raise PreconditionViolation("Hours per day must be greater than zero", "hours_per_day")
    if granularity <= 0:
        raise PreconditionViolation("Granularity must be greater than zero", "granularity")
    if total_hours < 0:
        raise PreconditionViolation("Total hours cannot be negative", "total_hours")

    raw_days = to_decimal(total_hours) / to_decimal(hours_per_day)
    return math.ceil(raw_days * granularity) / granularity


def calculate_totals(rows: Iterable) -> Hours:
    """Sum the ``hours`` of report rows."""
    total: Hours = 0
    for row in rows:
        total = add_hours(total, row.hours)
    return total


def calculate_days(
    rows: Iterable,
    hours_per_day: Hours = DEFAULT_HOURS_PER_DAY,
    granularity: int = DEFAULT_GRANULARITY
) -> float:
    """Day equivalent of a set of report rows, rounded once on the total."""
    return hours_to_days(calculate_totals(rows), hours_per_day, granularity)
