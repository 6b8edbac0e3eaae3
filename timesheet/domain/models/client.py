"""
Client domain model.
A client owns projects and, through them, time entries.
"""

from dataclasses import dataclass

from timesheet.domain.models.base import ValueObject, require_text


@dataclass(frozen=True)
class Client(ValueObject):
    """A client billed for project work."""

    name: str
    slug: str

    def validate(self) -> None:
        require_text(self.name, "name", "Client name")
        require_text(self.slug, "slug", "Client slug")

    def __str__(self) -> str:
        return self.name
