"""
Domain services for the timesheet system.
This module exports the week, conversion, aggregation and report services.
"""

from .week_service import (
    WeekWindow,
    WeekOption,
    week_window,
    week_start,
    week_label,
    recent_weeks,
    entries_for_week,
)
from .day_conversion import (
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_GRANULARITY,
    hours_to_days,
    calculate_totals,
    calculate_days,
)
from .aggregation_service import (
    EntryAggregator,
    WeekRow,
    WeekReport,
    WeekEntries,
    by_person,
    by_project,
    bucket_by_week,
    group_by_dimension,
    sum_hours,
    shape_rows,
)
from .report_service import ReportService, PersonHours, ProjectRollup, ProjectHours

__all__ = [
    "WeekWindow",
    "WeekOption",
    "week_window",
    "week_start",
    "week_label",
    "recent_weeks",
    "entries_for_week",
    "DEFAULT_HOURS_PER_DAY",
    "DEFAULT_GRANULARITY",
    "hours_to_days",
    "calculate_totals",
    "calculate_days",
    "EntryAggregator",
    "WeekRow",
    "WeekReport",
    "WeekEntries",
    "by_person",
    "by_project",
    "bucket_by_week",
    "group_by_dimension",
    "sum_hours",
    "shape_rows",
    "ReportService",
    "PersonHours",
    "ProjectRollup",
    "ProjectHours",
]
