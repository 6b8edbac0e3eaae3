"""
Base value object and exceptions for the domain layer.
This module contains the foundational classes shared by all timesheet records.
"""

from typing import Optional, Any
from abc import ABC
from dataclasses import dataclass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when a record or input value is invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class PreconditionViolation(DomainException):
    """Exception raised when a calculation is called with arguments it cannot honour."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message, "PRECONDITION_VIOLATION")
        self.argument = argument


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with slug {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    def validate(self) -> None:
        """Validate the value object's state. Override in subclasses."""
        pass


def require_text(value: Optional[str], field: str, label: str) -> None:
    """Raise ValidationError when a required text field is blank."""
    if not value or not value.strip():
        raise ValidationError(f"{label} is required", field)
