"""
Data Transfer Objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, DayConversionMixin
from .report_dto import *

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "DayConversionMixin",
    "IndexReportRequestDTO",
    "RecentWeeksRequestDTO",
    "ProjectOptionsRequestDTO",
    "WeeklyReportRequestDTO",
    "ReportRowDTO",
    "WeekReportDTO",
    "WeeklyReportResponseDTO",
    "EntryDTO",
    "IndexWeekDTO",
    "IndexReportResponseDTO",
    "WeekOptionDTO",
    "ProjectOptionDTO",
    "PersonHoursDTO",
    "ProjectRollupDTO",
    "ProjectHoursDTO",
    "ClientReportResponseDTO",
]
