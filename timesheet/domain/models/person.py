"""
Person domain model.
"""

from dataclasses import dataclass

from timesheet.domain.models.base import ValueObject, require_text


@dataclass(frozen=True)
class Person(ValueObject):
    """Someone who logs time against projects."""

    name: str
    slug: str

    def validate(self) -> None:
        require_text(self.name, "name", "Person name")
        require_text(self.slug, "slug", "Person slug")

    def __str__(self) -> str:
        return self.name
