"""
Report DTOs for the application layer.
Data Transfer Objects for weekly, index and client summary reports.
"""

from typing import List, Optional
import datetime as dt
from pydantic import Field

from .base_dto import RequestDTO, ResponseDTO, DayConversionMixin
from timesheet.domain.models.entry import Entry
from timesheet.domain.services.aggregation_service import WeekRow, WeekEntries
from timesheet.domain.services.report_service import ProjectRollup, ProjectHours
from timesheet.domain.services.week_service import WeekOption


# Request DTOs
class IndexReportRequestDTO(RequestDTO):
    """DTO for the unfiltered entry listing."""
    pass


class RecentWeeksRequestDTO(RequestDTO):
    """DTO for the week picker."""

    count: Optional[int] = Field(default=None, ge=0, le=104, description="Number of weeks")
    reference_date: Optional[dt.date] = Field(default=None, description="Date inside the newest week")


class ProjectOptionsRequestDTO(RequestDTO):
    """DTO for the project picker."""
    pass


# Response DTOs
class ReportRowDTO(ResponseDTO):
    """One summed row of a weekly report."""

    date: dt.date = Field(description="Work date")
    name: str = Field(description="Project or person name")
    slug: str = Field(description="Project or person slug")
    hours: float = Field(description="Hours summed for the day")

    @classmethod
    def from_row(cls, row: WeekRow) -> "ReportRowDTO":
        return cls(
            date=row.date,
            name=row.dimension.name,
            slug=row.dimension.slug,
            hours=float(row.hours)
        )


class WeekReportDTO(ResponseDTO):
    """A week of report rows with its totals."""

    week_start: dt.date = Field(description="Monday of the week")
    week_end: dt.date = Field(description="Sunday of the week")
    rows: List[ReportRowDTO] = Field(default_factory=list, description="Rows ordered by date")
    total_hours: float = Field(description="Hours logged in the week")
    total_days: float = Field(description="Day equivalent of total_hours")


class WeeklyReportResponseDTO(ResponseDTO):
    """Weekly report for a person, project or client."""

    name: str = Field(description="Subject name")
    slug: str = Field(description="Subject slug")
    weeks: List[WeekReportDTO] = Field(default_factory=list, description="Weeks, newest first")
    total_hours: float = Field(description="Hours across all weeks")
    total_days: float = Field(description="Day equivalent of total_hours")


class EntryDTO(ResponseDTO):
    """A single entry as listed in the index."""

    id: Optional[int] = Field(default=None, description="Entry ID")
    date: dt.date = Field(description="Work date")
    hours: float = Field(description="Hours logged")
    person_name: str = Field(description="Person name")
    person_slug: str = Field(description="Person slug")
    project_name: str = Field(description="Project name")
    project_slug: str = Field(description="Project slug")
    client_name: str = Field(description="Client name")

    @classmethod
    def from_domain(cls, entry: Entry) -> "EntryDTO":
        return cls(
            id=entry.id,
            date=entry.date,
            hours=float(entry.hours),
            person_name=entry.person.name,
            person_slug=entry.person.slug,
            project_name=entry.project.name,
            project_slug=entry.project.slug,
            client_name=entry.project.client.name
        )


class IndexWeekDTO(ResponseDTO):
    """Entries of one week in the index listing."""

    week_start: dt.date = Field(description="Monday of the week")
    entries: List[EntryDTO] = Field(default_factory=list, description="Entries of the week")

    @classmethod
    def from_week(cls, week: WeekEntries) -> "IndexWeekDTO":
        return cls(
            week_start=week.week_start,
            entries=[EntryDTO.from_domain(entry) for entry in week.entries]
        )


class IndexReportResponseDTO(ResponseDTO):
    """All entries grouped by week."""

    weeks: List[IndexWeekDTO] = Field(default_factory=list, description="Weeks, newest first")


class WeekOptionDTO(ResponseDTO):
    """A selectable week."""

    label: str = Field(description="Display label")
    value: str = Field(description="ISO date of the week start")

    @classmethod
    def from_option(cls, option: WeekOption) -> "WeekOptionDTO":
        return cls(label=option.label, value=option.value)


class ProjectOptionDTO(ResponseDTO):
    """A selectable project."""

    label: str = Field(description="Client / Project label")
    value: str = Field(description="Project slug")


class PersonHoursDTO(ResponseDTO):
    name: str = Field(description="Person name")
    hours: float = Field(description="Hours on the project")


class ProjectRollupDTO(ResponseDTO):
    """All-time hours per person on one project."""

    name: str = Field(description="Project name")
    slug: str = Field(description="Project slug")
    people: List[PersonHoursDTO] = Field(default_factory=list, description="People by name")

    @classmethod
    def from_rollup(cls, rollup: ProjectRollup) -> "ProjectRollupDTO":
        return cls(
            name=rollup.project.name,
            slug=rollup.project.slug,
            people=[PersonHoursDTO(name=p.name, hours=float(p.hours)) for p in rollup.people]
        )


class ProjectHoursDTO(ResponseDTO):
    """Total hours of one project."""

    name: str = Field(description="Project name")
    slug: str = Field(description="Project slug")
    hours: float = Field(description="Total hours")
    days: float = Field(description="Day equivalent of hours")


class ClientReportResponseDTO(WeeklyReportResponseDTO):
    """Client weekly report with all-time project rollups."""

    projects: List[ProjectRollupDTO] = Field(default_factory=list, description="Per-project people totals")
    project_hours: List[ProjectHoursDTO] = Field(default_factory=list, description="Per-project totals")
    client_hours: float = Field(description="Sum of per-project totals")
    client_days: float = Field(description="Day equivalent of client_hours")


class WeeklyReportRequestDTO(RequestDTO, DayConversionMixin):
    """DTO for a person, project or client weekly report."""

    slug: str = Field(min_length=1, max_length=255, description="Entity slug")


def project_hours_dto(row: ProjectHours, days: float) -> ProjectHoursDTO:
    """Build a project total DTO from a rollup row and its day equivalent."""
    return ProjectHoursDTO(name=row.name, slug=row.slug, hours=float(row.hours), days=days)
