"""
Domain models for the timesheet system.
This module exports all value objects and domain exceptions.
"""

from .base import (
    DomainException,
    ValidationError,
    PreconditionViolation,
    EntityNotFoundError,
    ValueObject,
)
from .client import Client
from .project import Project
from .person import Person
from .entry import Entry, Hours

__all__ = [
    "DomainException",
    "ValidationError",
    "PreconditionViolation",
    "EntityNotFoundError",
    "ValueObject",
    "Client",
    "Project",
    "Person",
    "Entry",
    "Hours",
]
