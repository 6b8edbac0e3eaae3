"""
Report use cases for the application layer.
Fetch resolved entries through the repository port and shape them into report DTOs.
"""

from itertools import chain
from typing import List, Optional, Tuple
import logging

from timesheet.application.use_cases.base_use_case import QueryUseCase
from timesheet.application.dto.report_dto import (
    IndexReportRequestDTO, RecentWeeksRequestDTO, ProjectOptionsRequestDTO,
    WeeklyReportRequestDTO, ReportRowDTO, WeekReportDTO, WeeklyReportResponseDTO,
    IndexWeekDTO, IndexReportResponseDTO, WeekOptionDTO, ProjectOptionDTO,
    ProjectRollupDTO, ClientReportResponseDTO, project_hours_dto
)
from timesheet.config import Settings, get_settings
from timesheet.domain.models.base import EntityNotFoundError
from timesheet.domain.repositories.timesheet_repository import TimesheetRepository
from timesheet.domain.services.aggregation_service import WeekReport
from timesheet.domain.services.day_conversion import calculate_totals, hours_to_days
from timesheet.domain.services.report_service import ReportService
from timesheet.domain.services.week_service import recent_weeks, week_window

logger = logging.getLogger(__name__)


class ReportUseCase(QueryUseCase):
    """Shared wiring for report use cases."""

    def __init__(
        self,
        repository: TimesheetRepository,
        report_service: Optional[ReportService] = None,
        settings: Optional[Settings] = None
    ):
        super().__init__()
        self.repository = repository
        self.report_service = report_service or ReportService()
        self.settings = settings or get_settings()

    def _conversion(self, request) -> Tuple[float, int]:
        """Day length and granularity for a request, falling back to settings."""
        hours_per_day = getattr(request, "hours_per_day", None)
        if hours_per_day is None:
            hours_per_day = self.settings.hours_per_day
        granularity = getattr(request, "granularity", None)
        if granularity is None:
            granularity = self.settings.day_granularity
        return hours_per_day, granularity

    def _week_dtos(self, reports: List[WeekReport], hours_per_day: float, granularity: int) -> List[WeekReportDTO]:
        weeks = []
        for report in reports:
            total = calculate_totals(report.rows)
            weeks.append(WeekReportDTO(
                week_start=report.week_start,
                week_end=week_window(report.week_start).end,
                rows=[ReportRowDTO.from_row(row) for row in report.rows],
                total_hours=float(total),
                total_days=hours_to_days(total, hours_per_day, granularity)
            ))
        return weeks

    def _weekly_fields(self, reports: List[WeekReport], request) -> dict:
        hours_per_day, granularity = self._conversion(request)
        total = calculate_totals(chain.from_iterable(report.rows for report in reports))
        return {
            "weeks": self._week_dtos(reports, hours_per_day, granularity),
            "total_hours": float(total),
            "total_days": hours_to_days(total, hours_per_day, granularity),
        }


class ListEntriesByWeekUseCase(ReportUseCase):
    """Use case for the unfiltered entry listing grouped by week."""

    async def _execute_business_logic(self, request: IndexReportRequestDTO) -> IndexReportResponseDTO:
        entries = await self.repository.list_entries()
        weeks = self.report_service.index_report(entries)
        logger.info(f"Listed {len(entries)} entries across {len(weeks)} weeks")
        return IndexReportResponseDTO(weeks=[IndexWeekDTO.from_week(week) for week in weeks])


class ListRecentWeeksUseCase(ReportUseCase):
    """Use case for the week picker options."""

    async def _execute_business_logic(self, request: RecentWeeksRequestDTO) -> List[WeekOptionDTO]:
        count = request.count if request.count is not None else self.settings.recent_week_count
        return [
            WeekOptionDTO.from_option(option)
            for option in recent_weeks(count, request.reference_date)
        ]


class ListProjectOptionsUseCase(ReportUseCase):
    """Use case for the project picker options."""

    async def _execute_business_logic(self, request: ProjectOptionsRequestDTO) -> List[ProjectOptionDTO]:
        projects = await self.repository.list_projects()
        return [
            ProjectOptionDTO(label=label, value=slug)
            for label, slug in self.report_service.project_options(projects)
        ]


class GetPersonReportUseCase(ReportUseCase):
    """Use case for one person's weekly hours per project."""

    async def _execute_business_logic(self, request: WeeklyReportRequestDTO) -> WeeklyReportResponseDTO:
        person = await self.repository.find_person(request.slug)
        if not person:
            raise EntityNotFoundError("Person", request.slug)

        entries = await self.repository.entries_for_person(request.slug)
        reports = self.report_service.person_report(entries)
        logger.info(f"Built person report for {person.slug}: {len(reports)} weeks")
        return WeeklyReportResponseDTO(
            name=person.name,
            slug=person.slug,
            **self._weekly_fields(reports, request)
        )


class GetProjectReportUseCase(ReportUseCase):
    """Use case for one project's weekly hours per person."""

    async def _execute_business_logic(self, request: WeeklyReportRequestDTO) -> WeeklyReportResponseDTO:
        project = await self.repository.find_project(request.slug)
        if not project:
            raise EntityNotFoundError("Project", request.slug)

        entries = await self.repository.entries_for_project(request.slug)
        reports = self.report_service.project_report(entries)
        logger.info(f"Built project report for {project.slug}: {len(reports)} weeks")
        return WeeklyReportResponseDTO(
            name=project.name,
            slug=project.slug,
            **self._weekly_fields(reports, request)
        )


class GetClientReportUseCase(ReportUseCase):
    """
    Use case for a client summary.
    Combines the weekly per-person view with all-time project rollups.
    """

    async def _execute_business_logic(self, request: WeeklyReportRequestDTO) -> ClientReportResponseDTO:
        client = await self.repository.find_client(request.slug)
        if not client:
            raise EntityNotFoundError("Client", request.slug)

        entries = await self.repository.entries_for_client(request.slug)
        hours_per_day, granularity = self._conversion(request)

        reports = self.report_service.client_report(entries)
        rollup = self.report_service.client_rollup(entries)
        project_rows = self.report_service.total_project_hours(entries, client)
        client_hours = self.report_service.total_client_hours(project_rows)

        logger.info(f"Built client report for {client.slug}: {len(project_rows)} projects")
        return ClientReportResponseDTO(
            name=client.name,
            slug=client.slug,
            projects=[ProjectRollupDTO.from_rollup(item) for item in rollup.get(client.name, [])],
            project_hours=[
                project_hours_dto(row, hours_to_days(row.hours, hours_per_day, granularity))
                for row in project_rows
            ],
            client_hours=float(client_hours),
            client_days=hours_to_days(client_hours, hours_per_day, granularity),
            **self._weekly_fields(reports, request)
        )
