"""
Entry domain model.
Represents hours logged by a person on a project for one calendar day.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from timesheet.domain.models.base import ValueObject, ValidationError
from timesheet.domain.models.person import Person
from timesheet.domain.models.project import Project


Hours = Union[int, float, Decimal]


@dataclass(frozen=True)
class Entry(ValueObject):
    """
    Immutable time entry.

    Person and project are fully resolved before the entry reaches the
    reporting services. Hours are not range-checked here; the aggregation
    step rejects negative values when it sums them.
    """

    date: date
    hours: Hours
    person: Person
    project: Project
    id: Optional[int] = field(default=None, compare=False)

    def validate(self) -> None:
        if isinstance(self.date, datetime) or not isinstance(self.date, date):
            raise ValidationError("Entry date must be a calendar date", "date")
        if isinstance(self.hours, bool) or not isinstance(self.hours, (int, float, Decimal)):
            raise ValidationError("Entry hours must be a number", "hours")
        if not isinstance(self.person, Person):
            raise ValidationError("Entry person is required", "person")
        if not isinstance(self.project, Project):
            raise ValidationError("Entry project is required", "project")

    @property
    def client(self):
        """Client of the entry's project."""
        return self.project.client
