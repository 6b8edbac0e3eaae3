"""
Repository interfaces for the domain layer.
This module exports the repository port used for dependency injection.
"""

from .timesheet_repository import TimesheetRepository

__all__ = [
    "TimesheetRepository",
]
