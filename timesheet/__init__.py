"""Timesheet tracking with weekly, per-person, per-project and per-client reports."""

__version__ = "1.0.0"
