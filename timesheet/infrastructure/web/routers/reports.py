"""
Reports router.
Exposes the weekly person, project and client reports, the entry index and pickers.
"""

from typing import Annotated, List, Optional
from datetime import date
import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status, Query

from timesheet.application.dto.report_dto import (
    IndexReportRequestDTO,
    RecentWeeksRequestDTO,
    ProjectOptionsRequestDTO,
    WeeklyReportRequestDTO,
    IndexReportResponseDTO,
    WeeklyReportResponseDTO,
    ClientReportResponseDTO,
    WeekOptionDTO,
    ProjectOptionDTO,
)
from timesheet.application.use_cases.base_use_case import UseCaseResult
from timesheet.application.use_cases.report_use_cases import (
    ListEntriesByWeekUseCase,
    ListRecentWeeksUseCase,
    ListProjectOptionsUseCase,
    GetPersonReportUseCase,
    GetProjectReportUseCase,
    GetClientReportUseCase,
)
from timesheet.config import Settings, get_settings
from timesheet.domain.repositories.timesheet_repository import TimesheetRepository

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_STATUS = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_CONTENT,
    "PRECONDITION_VIOLATION": status.HTTP_422_UNPROCESSABLE_CONTENT,
}


def get_timesheet_repository(request: Request) -> TimesheetRepository:
    """Dependency to get the repository attached to the application."""
    return request.app.state.repository


Repository = Annotated[TimesheetRepository, Depends(get_timesheet_repository)]
AppSettings = Annotated[Settings, Depends(get_settings)]
HoursPerDay = Annotated[Optional[float], Query(gt=0, description="Hours in a working day")]
Granularity = Annotated[Optional[int], Query(ge=1, description="Round days up to 1/granularity")]


def unwrap(result: UseCaseResult):
    """Return the result data or raise the matching HTTP error."""
    if result.success:
        return result.data
    status_code = ERROR_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST)
    logger.info(f"Report request failed with {result.error_code}: {result.error}")
    raise HTTPException(status_code=status_code, detail=result.error)


@router.get("/entries", response_model=IndexReportResponseDTO)
async def list_entries(repository: Repository, settings: AppSettings):
    """
    List all entries grouped by week, newest week first.
    """
    use_case = ListEntriesByWeekUseCase(repository, settings=settings)
    return unwrap(await use_case.execute(IndexReportRequestDTO()))


@router.get("/weeks", response_model=List[WeekOptionDTO])
async def list_recent_weeks(
    repository: Repository,
    settings: AppSettings,
    count: Optional[int] = Query(None, ge=0, le=104, description="Number of weeks"),
    reference_date: Optional[date] = Query(None, description="Date inside the newest week")
):
    """
    Week picker options, starting with the current week.

    - **count**: Number of weeks (defaults to the configured count)
    - **reference_date**: Use this date instead of today
    """
    use_case = ListRecentWeeksUseCase(repository, settings=settings)
    request = RecentWeeksRequestDTO(count=count, reference_date=reference_date)
    return unwrap(await use_case.execute(request))


@router.get("/projects/options", response_model=List[ProjectOptionDTO])
async def list_project_options(repository: Repository, settings: AppSettings):
    """
    Project picker options labelled "Client / Project".
    """
    use_case = ListProjectOptionsUseCase(repository, settings=settings)
    return unwrap(await use_case.execute(ProjectOptionsRequestDTO()))


@router.get("/people/{slug}/report", response_model=WeeklyReportResponseDTO)
async def get_person_report(
    slug: str,
    repository: Repository,
    settings: AppSettings,
    hours_per_day: HoursPerDay = None,
    granularity: Granularity = None
):
    """
    Weekly hours of one person, per project and day.

    - **slug**: Person slug
    - **hours_per_day** / **granularity**: Override the day conversion
    """
    use_case = GetPersonReportUseCase(repository, settings=settings)
    request = WeeklyReportRequestDTO(slug=slug, hours_per_day=hours_per_day, granularity=granularity)
    return unwrap(await use_case.execute(request))


@router.get("/projects/{slug}/report", response_model=WeeklyReportResponseDTO)
async def get_project_report(
    slug: str,
    repository: Repository,
    settings: AppSettings,
    hours_per_day: HoursPerDay = None,
    granularity: Granularity = None
):
    """
    Weekly hours of one project, per person and day.

    - **slug**: Project slug
    - **hours_per_day** / **granularity**: Override the day conversion
    """
    use_case = GetProjectReportUseCase(repository, settings=settings)
    request = WeeklyReportRequestDTO(slug=slug, hours_per_day=hours_per_day, granularity=granularity)
    return unwrap(await use_case.execute(request))


@router.get("/clients/{slug}/report", response_model=ClientReportResponseDTO)
async def get_client_report(
    slug: str,
    repository: Repository,
    settings: AppSettings,
    hours_per_day: HoursPerDay = None,
    granularity: Granularity = None
):
    """
    Client summary: weekly hours per person, all-time hours per project and person,
    project totals and the client grand total.

    - **slug**: Client slug
    - **hours_per_day** / **granularity**: Override the day conversion
    """
    use_case = GetClientReportUseCase(repository, settings=settings)
    request = WeeklyReportRequestDTO(slug=slug, hours_per_day=hours_per_day, granularity=granularity)
    return unwrap(await use_case.execute(request))
