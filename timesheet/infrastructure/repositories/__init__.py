"""
Repository implementations for the infrastructure layer.
"""

from .in_memory_repository import InMemoryTimesheetRepository

__all__ = [
    "InMemoryTimesheetRepository",
]
