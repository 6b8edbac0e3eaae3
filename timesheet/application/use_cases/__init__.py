"""
Application layer use cases.
Report queries for the timesheet system.
"""

from .base_use_case import *
from .report_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "UseCaseResult",
    # Report Use Cases
    "ReportUseCase",
    "ListEntriesByWeekUseCase",
    "ListRecentWeeksUseCase",
    "ListProjectOptionsUseCase",
    "GetPersonReportUseCase",
    "GetProjectReportUseCase",
    "GetClientReportUseCase",
]
