"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass


class DayConversionMixin(BaseModel):
    """Optional per-request overrides for the hours-to-days conversion."""

    hours_per_day: Optional[float] = Field(default=None, gt=0, description="Hours in a working day")
    granularity: Optional[int] = Field(default=None, ge=1, description="Round days up to 1/granularity")
