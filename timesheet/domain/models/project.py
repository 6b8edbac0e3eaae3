"""
Project domain model.
"""

from dataclasses import dataclass

from timesheet.domain.models.base import ValueObject, ValidationError, require_text
from timesheet.domain.models.client import Client


@dataclass(frozen=True)
class Project(ValueObject):
    """
    A project belonging to exactly one client.
    The client is resolved eagerly and travels with the project.
    """

    name: str
    slug: str
    client: Client

    def validate(self) -> None:
        require_text(self.name, "name", "Project name")
        require_text(self.slug, "slug", "Project slug")
        if not isinstance(self.client, Client):
            raise ValidationError("Project client is required", "client")

    @property
    def display_name(self) -> str:
        """Name prefixed with the client, as shown in pickers."""
        return f"{self.client.name} / {self.name}"

    def __str__(self) -> str:
        return self.name
